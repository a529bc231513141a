import os

import pytest
from PySide6.QtWidgets import QApplication

from movieBrowser import settings
from movieBrowser.gui.workers import InlineDispatcher
from movieBrowser.metadata.core.models import (
    Configuration,
    Genre,
    ImagesConfig,
    MovieDetails,
    MoviesList,
    MovieSummary,
)
from fakes import FakeConfigurationUseCase


@pytest.fixture(scope="session", autouse=True)
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def log_to_tmp(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "LOG_PATH", tmp_path / "movie_browser.log")


@pytest.fixture
def configuration():
    return Configuration(
        images=ImagesConfig(base_url="https://example.com", poster_sizes=["w500", "original"])
    )


@pytest.fixture
def configuration_use_case(configuration):
    return FakeConfigurationUseCase(configuration)


@pytest.fixture
def dispatcher():
    return InlineDispatcher()


@pytest.fixture
def two_movies():
    return MoviesList(results=[
        MovieSummary(id=1, title="Movie 1", poster_path="/poster1.jpg", release_date="2023-01-01"),
        MovieSummary(id=2, title="Movie 2", poster_path="/poster2.jpg", release_date="2023-02-01"),
    ])


@pytest.fixture
def full_details():
    return MovieDetails(
        title="Test Movie",
        overview="This is a test movie",
        poster_path="/test.jpg",
        budget=1000000,
        runtime=120,
        genres=[Genre(id=1, name="Action")],
    )
