import json
from datetime import datetime

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session

from listening_stats import __main__ as cli
from listening_stats.config import settings
from listening_stats.models.db import Base, PlaybackSession


@pytest.fixture
def configured(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'library.db'}"
    monkeypatch.setattr(settings, 'DATABASE_URL', url)
    monkeypatch.setattr(settings, 'USER_ID', 'user-1')
    monkeypatch.setattr(settings, 'YEAR', 2024)
    monkeypatch.setattr(settings, 'OUTPUT_DIR', str(tmp_path / 'output'))

    engine = create_engine(url)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add(PlaybackSession(
            user_id='user-1',
            media_item_type='book',
            created_at=datetime(2024, 10, 4),
            time_listening=4500.0,
            media_metadata={'authors': [{'name': 'N. K. Jemisin'}], 'genres': ['Fantasy']},
        ))
        session.commit()
    engine.dispose()
    return tmp_path


def test_run_writes_report(configured) -> None:
    cli.run()

    data = json.loads((configured / 'output' / 'year_stats_2024.json').read_text())
    assert data['totalListeningSessions'] == 1
    assert data['totalListeningTimePretty'] == '1 hr 15 min'
    assert data['mostListenedAuthor']['name'] == 'N. K. Jemisin'
    assert data['mostListenedMonth']['month'] == 9
    assert data['longestAudiobookFinished'] is None


def test_run_exits_without_user(configured, monkeypatch) -> None:
    monkeypatch.setattr(settings, 'USER_ID', None)

    with pytest.raises(SystemExit) as excinfo:
        cli.run()

    assert excinfo.value.code == 1


def test_run_exits_when_library_tables_are_missing(tmp_path, monkeypatch) -> None:
    url = f"sqlite:///{tmp_path / 'empty.db'}"
    monkeypatch.setattr(settings, 'DATABASE_URL', url)
    monkeypatch.setattr(settings, 'USER_ID', 'user-1')
    monkeypatch.setattr(settings, 'YEAR', 2024)
    monkeypatch.setattr(settings, 'OUTPUT_DIR', str(tmp_path / 'output'))

    with pytest.raises(SystemExit) as excinfo:
        cli.run()

    assert excinfo.value.code == 1
    assert not (tmp_path / 'output').exists()
    engine = create_engine(url)
    try:
        assert inspect(engine).get_table_names() == []
    finally:
        engine.dispose()
