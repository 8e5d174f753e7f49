"""Sample Kotlin project written to disk for end-to-end tests.

CLEAN_SOURCES is a layered app with no findings. BROKEN_SOURCES adds
exactly one finding per category plus one undecodable file.
"""

from pathlib import Path

from tests.factories import SRC

CLEAN_SOURCES: dict[str, str] = {
    "domain/entities/Food.kt": """\
package com.example.app.domain.entities

data class Food(val id: String, val name: String)
""",
    "domain/repositories/FoodRepository.kt": """\
package com.example.app.domain.repositories

import com.example.app.domain.entities.Food

interface FoodRepository {
    suspend fun all(): List<Food>
}
""",
    "domain/usecases/GetFoodUseCase.kt": """\
package com.example.app.domain.usecases

import com.example.app.domain.entities.Food
import com.example.app.domain.repositories.FoodRepository
import javax.inject.Inject

class GetFoodUseCase @Inject constructor(
    private val repository: FoodRepository
) {
    suspend operator fun invoke(): List<Food> = repository.all()
}
""",
    "data/local/FoodDao.kt": """\
package com.example.app.data.local

import androidx.room.Dao
import com.example.app.domain.entities.Food

@Dao
interface FoodDao {
    suspend fun all(): List<Food>
}
""",
    "data/local/AppDatabase.kt": """\
package com.example.app.data.local

import androidx.room.Database
import androidx.room.RoomDatabase

@Database(entities = [FoodEntity::class], version = 1)
abstract class AppDatabase : RoomDatabase() {
    abstract fun foodDao(): FoodDao
}
""",
    "data/repositories/FoodRepositoryImpl.kt": """\
package com.example.app.data.repositories

import com.example.app.data.local.FoodDao
import com.example.app.domain.entities.Food
import com.example.app.domain.repositories.FoodRepository
import javax.inject.Inject

class FoodRepositoryImpl @Inject constructor(
    private val dao: FoodDao
) : FoodRepository {
    override suspend fun all(): List<Food> = dao.all()
}
""",
    "presentation/viewmodels/FoodViewModel.kt": """\
package com.example.app.presentation.viewmodels

import androidx.lifecycle.ViewModel
import com.example.app.domain.usecases.GetFoodUseCase
import javax.inject.Inject

@HiltViewModel
class FoodViewModel @Inject constructor(
    private val getFood: GetFoodUseCase
) : ViewModel()
""",
    "ui/screens/FoodScreen.kt": """\
package com.example.app.ui.screens

import com.example.app.presentation.viewmodels.FoodViewModel

@Composable
fun FoodScreen(viewModel: FoodViewModel) {
}
""",
    "di/DatabaseModule.kt": """\
package com.example.app.di

import android.content.Context
import com.example.app.data.local.AppDatabase
import com.example.app.data.local.FoodDao
import dagger.Module
import dagger.Provides

@Module
@InstallIn(SingletonComponent::class)
object DatabaseModule {
    @Provides
    @Singleton
    fun provideDatabase(@ApplicationContext context: Context): AppDatabase =
        Room.databaseBuilder(context, AppDatabase::class.java, "app.db").build()

    @Provides
    @Singleton
    fun provideFoodDao(database: AppDatabase): FoodDao = database.foodDao()
}
""",
    "di/RepositoryModule.kt": """\
package com.example.app.di

import com.example.app.data.repositories.FoodRepositoryImpl
import com.example.app.domain.repositories.FoodRepository
import dagger.Binds
import dagger.Module

@Module
@InstallIn(SingletonComponent::class)
abstract class RepositoryModule {
    @Binds
    abstract fun bindFoodRepository(impl: FoodRepositoryImpl): FoodRepository
}
""",
}

BROKEN_SOURCES: dict[str, str] = {
    # domain → data
    "domain/usecases/SyncFoodUseCase.kt": """\
package com.example.app.domain.usecases

import com.example.app.data.local.FoodDao
import javax.inject.Inject

class SyncFoodUseCase @Inject constructor(
    private val dao: FoodDao
)
""",
    # FoodMapper <-> FoodFormatter
    "data/mappers/FoodMapper.kt": """\
package com.example.app.data.mappers

import com.example.app.data.mappers.FoodFormatter

class FoodMapper(private val formatter: FoodFormatter)
""",
    "data/mappers/FoodFormatter.kt": """\
package com.example.app.data.mappers

import com.example.app.data.mappers.FoodMapper

class FoodFormatter(private val mapper: FoodMapper)
""",
    # Tracker -> Session -> Tracker, Clock never provided, no @InstallIn
    "di/AnalyticsModule.kt": """\
package com.example.app.di

import dagger.Module
import dagger.Provides

@Module
object AnalyticsModule {
    @Provides
    fun provideTracker(session: Session): Tracker = Tracker(session)

    @Provides
    fun provideSession(tracker: Tracker, clock: Clock): Session = Session(tracker)
}
""",
    # interface without implementation
    "domain/repositories/UserRepository.kt": """\
package com.example.app.domain.repositories

interface UserRepository
""",
    # view model outside presentation
    "ui/screens/ProfileViewModel.kt": """\
package com.example.app.ui.screens

class ProfileViewModel
""",
}

UNDECODABLE = "data/local/Broken.kt"


def write_sample_project(root: Path, *, broken: bool = False) -> Path:
    """Write the sample project under root.

    Args:
        root: Scan root to create
        broken: Add one finding per category and an undecodable file

    Returns:
        root
    """
    sources = dict(CLEAN_SOURCES)
    if broken:
        sources.update(BROKEN_SOURCES)

    for relative, source in sources.items():
        path = root / SRC / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")

    if broken:
        bad = root / SRC / UNDECODABLE
        bad.write_bytes(b"package com.example.app.data.local\n\xff\xfe")

    root.mkdir(parents=True, exist_ok=True)
    return root
