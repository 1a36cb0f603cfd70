import pytest
from sqlalchemy import select

from minisoccer.database import init_database
from minisoccer.models import User
from minisoccer.passwords import check_password_hash
from minisoccer.seeder import seed_users


@pytest.fixture
def session_factory(tmp_path):
    return init_database(f"sqlite:///{tmp_path / 'seed.db'}", True)


def test_seed_creates_admin_and_user(session_factory, capsys):
    created = seed_users(session_factory)
    assert created == ["admin@example.com", "user@example.com"]
    out = capsys.readouterr().out
    assert "User created: admin@example.com" in out
    assert "User created: user@example.com" in out
    with session_factory() as session:
        roles = {u.email: u.role for u in session.scalars(select(User))}
    assert roles == {"admin@example.com": "admin", "user@example.com": "user"}


def test_seeded_passwords_verify(session_factory):
    seed_users(session_factory)
    with session_factory() as session:
        users = list(session.scalars(select(User)))
    assert len(users) == 2
    assert all(check_password_hash("password", u.password_hash) for u in users)


def test_second_seed_reports_failures(session_factory, capsys):
    seed_users(session_factory)
    capsys.readouterr()
    assert seed_users(session_factory) == []
    out = capsys.readouterr().out
    assert "Failed to create user: admin@example.com -" in out
    assert "Failed to create user: user@example.com -" in out
    with session_factory() as session:
        assert len(list(session.scalars(select(User)))) == 2