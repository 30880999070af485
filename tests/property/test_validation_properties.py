"""Property-based tests for request validation."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, settings, strategies as st
from pydantic import ValidationError as PydanticValidationError

from petcare.errors import ValidationError
from petcare.models.enums import PetType, RecurrencePattern, TaskType
from petcare.schemas.common import to_naive_utc
from petcare.schemas.pet import PetCreate, PetUpdate
from petcare.schemas.task import TaskCreate
from petcare.schemas.user import UserPreferences
from petcare.services.task_service import check_recurrence


pytestmark = pytest.mark.property

# Names with at least one visible character
valid_names = st.text(
    min_size=1,
    max_size=255,
    alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
).filter(lambda s: s.strip() != "")
blank_names = st.text(alphabet=" \t\n\r", max_size=10)
naive_datetimes = st.datetimes(
    min_value=datetime(2000, 1, 1), max_value=datetime(2100, 1, 1)
)
offsets = st.integers(min_value=-14 * 60, max_value=14 * 60).map(
    lambda minutes: timezone(timedelta(minutes=minutes))
)


class TestNameProperties:

    @settings(max_examples=100)
    @given(name=valid_names, pet_type=st.sampled_from(PetType))
    def test_visible_pet_names_are_accepted_and_stripped(self, name, pet_type):
        pet = PetCreate(name=name, type=pet_type)
        assert pet.name == name.strip()
        assert pet.type == pet_type.value

    @settings(max_examples=50)
    @given(name=blank_names)
    def test_blank_pet_names_are_rejected(self, name):
        with pytest.raises(PydanticValidationError) as exc_info:
            PetCreate(name=name, type="dog")
        assert any(error["loc"] == ("name",) for error in exc_info.value.errors())

    @settings(max_examples=50)
    @given(name=blank_names)
    def test_blank_names_cannot_be_set_by_update(self, name):
        with pytest.raises(PydanticValidationError):
            PetUpdate(name=name)

    @settings(max_examples=50)
    @given(title=blank_names)
    def test_blank_task_titles_are_rejected(self, title):
        with pytest.raises(PydanticValidationError):
            TaskCreate(
                pet_id=uuid.uuid4(),
                title=title,
                type="feeding",
                scheduled_time=datetime(2030, 1, 1),
            )


class TestScheduledTimeProperties:

    @settings(max_examples=100)
    @given(moment=naive_datetimes, tz=offsets)
    def test_aware_times_are_stored_as_naive_utc(self, moment, tz):
        aware = moment.replace(tzinfo=tz)
        converted = to_naive_utc(aware)
        assert converted.tzinfo is None
        assert converted == aware.astimezone(timezone.utc).replace(tzinfo=None)

    @settings(max_examples=100)
    @given(moment=naive_datetimes)
    def test_naive_times_are_unchanged(self, moment):
        assert to_naive_utc(moment) == moment

    @settings(max_examples=100)
    @given(moment=naive_datetimes, tz=offsets, task_type=st.sampled_from(TaskType))
    def test_task_scheduled_time_is_normalized(self, moment, tz, task_type):
        task = TaskCreate(
            pet_id=uuid.uuid4(),
            title="Feed",
            type=task_type,
            scheduled_time=moment.replace(tzinfo=tz),
        )
        assert task.scheduled_time.tzinfo is None
        assert task.priority == "medium"


class TestRecurrenceProperties:

    @settings(max_examples=20)
    @given(pattern=st.one_of(st.none(), st.sampled_from([p.value for p in RecurrencePattern])))
    def test_one_off_tasks_never_keep_a_pattern(self, pattern):
        assert check_recurrence(False, pattern) is None

    @settings(max_examples=20)
    @given(pattern=st.sampled_from([p.value for p in RecurrencePattern]))
    def test_recurring_tasks_keep_their_pattern(self, pattern):
        assert check_recurrence(True, pattern) == pattern

    def test_recurring_task_without_pattern(self):
        with pytest.raises(ValidationError) as exc_info:
            check_recurrence(True, None)
        assert exc_info.value.errors[0]["field"] == "recurrencePattern"


class TestPreferencesProperties:

    @settings(max_examples=100)
    @given(
        theme=st.sampled_from(["light", "dark"]),
        email=st.booleans(),
        push=st.booleans(),
        widgets=st.lists(st.sampled_from(["tasks", "pets", "analytics", "notifications", "tips"])),
    )
    def test_stored_form_loads_back_unchanged(self, theme, email, push, widgets):
        prefs = UserPreferences.model_validate({
            "theme": theme,
            "notifications": {"email": email, "push": push},
            "dashboard": {"widgets": widgets},
        })
        stored = prefs.model_dump(mode="json")
        assert UserPreferences.model_validate(stored) == prefs
        assert len(prefs.dashboard.widgets) == len(set(widgets))

    @settings(max_examples=50)
    @given(key=st.text(min_size=1, max_size=20).filter(
        lambda k: k not in {"version", "theme", "notifications", "dashboard"}
    ))
    def test_unknown_keys_are_rejected(self, key):
        with pytest.raises(PydanticValidationError):
            UserPreferences.model_validate({key: True})
