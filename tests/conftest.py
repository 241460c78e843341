"""
Shared fixtures for the carbon tracker tests
"""
import logging
from typing import Iterable, List

import pytest

from carbon_tracker.config import AppConfig
from carbon_tracker.controller import TrackerController
from carbon_tracker.persistence import TextFileRepository
from carbon_tracker.view import ConsoleView


class ScriptedView(ConsoleView):
    """Console view fed from a list of answers; output is collected"""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []
        self.messages: List[str] = []
        self.clears = 0

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def prompt(self, frage: str) -> str:
        self.prompts.append(frage)
        if not self.answers:
            raise EOFError("no more scripted input")
        return self.answers.pop(0)

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def clear(self) -> None:
        self.clears += 1

    def render_admin_menu(self) -> None:
        self.messages.append("<admin menu>")

    def render_user_menu(self) -> None:
        self.messages.append("<user menu>")

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def config(tmp_path) -> AppConfig:
    """Config pointing at an empty temporary data directory"""
    return AppConfig(data_dir=tmp_path)


@pytest.fixture
def repo(config) -> TextFileRepository:
    return TextFileRepository(config)


@pytest.fixture
def view() -> ScriptedView:
    return ScriptedView()


@pytest.fixture
def controller(repo, view, config) -> TrackerController:
    return TrackerController(repo, view, config)


@pytest.fixture
def write_file(config):
    """Write a data file into the temporary data directory"""
    def _write(name: str, content: str) -> None:
        (config.data_dir / name).write_text(content, encoding="utf-8")
    return _write


@pytest.fixture
def read_file(config):
    def _read(name: str) -> str:
        return (config.data_dir / name).read_text(encoding="utf-8")
    return _read


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging between tests"""
    yield
    package_logger = logging.getLogger("carbon_tracker")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
