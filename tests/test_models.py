from sqlalchemy import Text

from task_manager.models.task import Task
from task_manager.models.user import User

from .conftest import TestingSessionLocal


def make_user(db, email="j@test.com"):
    return User.create(db, name="John", email=email, password="hash")


def test_create_assigns_id_and_timestamps(db_session):
    user = make_user(db_session)
    assert len(user.id) == 24
    assert user.created_at is not None
    assert user.updated_at is not None
    assert User.find_by_email(db_session, "j@test.com").id == user.id


def test_task_defaults_to_not_completed(db_session):
    user = make_user(db_session)
    task = Task.create(db_session, title="T", description="D", user_id=user.id)
    assert task.completed is False
    assert task.is_owned_by(user.id)


def test_find_all_and_find_one_are_scoped_to_owner(db_session):
    john = make_user(db_session)
    jane = make_user(db_session, email="jane@test.com")
    mine = Task.create(db_session, title="Mine", description="D", user_id=john.id)
    Task.create(db_session, title="Hers", description="D", user_id=jane.id)

    assert [task.id for task in Task.find_all(db_session, john.id)] == [mine.id]
    assert Task.find_one(db_session, mine.id, john.id).id == mine.id
    assert Task.find_one(db_session, mine.id, jane.id) is None


def test_apply_update_keeps_owner(db_session):
    user = make_user(db_session)
    task = Task.create(db_session, title="T", description="D", user_id=user.id)

    task.apply_update(db_session, "T2", "D2", completed=True)
    assert (task.title, task.description, task.completed, task.user_id) == ("T2", "D2", True, user.id)

    task.apply_update(db_session, "T3", "D3")
    assert task.completed is True


def test_delete(db_session):
    user = make_user(db_session)
    task = Task.create(db_session, title="T", description="D", user_id=user.id)
    task_id = task.id
    task.delete(db_session)
    assert Task.find_by_id(db_session, task_id) is None


def test_find_by_id_reload_sees_rows_deleted_elsewhere(db_session):
    user = make_user(db_session)
    other = TestingSessionLocal()
    try:
        other.delete(other.get(User, user.id))
        other.commit()
    finally:
        other.close()

    # The identity map still holds the object until a reload is asked for
    assert User.find_by_id(db_session, user.id) is user
    assert User.find_by_id(db_session, user.id, reload=True) is None


def test_task_title_column_is_unbounded_text():
    assert isinstance(Task.__table__.c.title.type, Text)
