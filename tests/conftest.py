import pytest

from strength_tracker.storage.source_directory import SourceDirectory
from strength_tracker.storage.user_store import UserDataStore
from strength_tracker.utils.config import reset_config

APPLE_HEADER = "Date,Workout Name,Duration,Exercise Name,Set Order,Weight,Reps,Distance,Seconds,Notes,Workout Notes,RPE"
ANDROID_HEADER = (
    "Date;Workout Name;Exercise Name;Set Order;Weight;Weight Unit;Reps;RPE;"
    "Distance;Distance Unit;Seconds;Notes;Workout Notes;Workout Duration"
)


def apple_row(date, exercise, weight, reps, order=1):
    return f"{date},Workout,1h,{exercise},{order},{weight},{reps},,,,,"


def android_row(date, exercise, weight, reps, order=1):
    return f"{date};Workout;{exercise};{order};{weight};kg;{reps};;;;;;;45m"


def apple_export(*rows):
    return "\n".join([APPLE_HEADER, *rows]) + "\n"


def android_export(*rows):
    return "\n".join([ANDROID_HEADER, *rows]) + "\n"


@pytest.fixture(autouse=True)
def fresh_config():
    config = reset_config()
    yield config
    reset_config()


@pytest.fixture
def storage_dir(tmp_path):
    path = tmp_path / "storage"
    path.mkdir()
    return path


@pytest.fixture
def store(storage_dir):
    return UserDataStore(SourceDirectory(str(storage_dir)))


@pytest.fixture
def bench_export():
    return apple_export(apple_row("2024-01-01 10:00:00", "Bench", 100, 5))


@pytest.fixture
def squat_export():
    return android_export(
        android_row("2024-01-02 18:30:00", "Squat", 80, 5, order=1),
        android_row("2024-01-02 18:30:00", "Squat", 90, 3, order=2),
    )
