"""
Unit tests for payload models and the ParseResult union.

Tests validation bounds, immutability, intent accessors and rebuilding
results from their serialized form.
"""

import pytest
from pydantic import ValidationError

from voicelog.domain.commands import (
    RESULT_BY_INTENT,
    CommandIntent,
    FoodItem,
    MealResult,
    MicronutrientType,
    ParsedMealCommand,
    ParsedMoodCommand,
    ParsedSupplementCommand,
    ParsedWaterCommand,
    ParseError,
    SupplementResult,
    Unknown,
    WaterResult,
    parse_result_from_dict,
    parse_result_from_json,
)
from voicelog.domain.shared.errors import (
    DomainError,
    ExtractionError,
    MissingValueError,
    VoiceCommandError,
)


class TestPayloadModels:
    """Test payload validation."""

    def test_mood_level_bounds(self) -> None:
        """Test mood level must be within 1-5."""
        assert ParsedMoodCommand(level=1).level == 1
        assert ParsedMoodCommand(level=5).level == 5

        with pytest.raises(ValidationError):
            ParsedMoodCommand(level=0)
        with pytest.raises(ValidationError):
            ParsedMoodCommand(level=6)

    def test_water_unit_is_ml(self) -> None:
        """Test water is always stored in ml."""
        water = ParsedWaterCommand(amount=237, spoken_unit="ounces")

        assert water.unit == "ml"
        with pytest.raises(ValidationError):
            ParsedWaterCommand(amount=237, unit="oz", spoken_unit="oz")

    def test_food_name_required(self) -> None:
        """Test food name cannot be empty."""
        with pytest.raises(ValidationError):
            FoodItem(name="")

    def test_negative_calories_rejected(self) -> None:
        """Test total calories cannot be negative."""
        with pytest.raises(ValidationError):
            ParsedMealCommand(total_calories=-1)

    def test_frozen(self) -> None:
        """Test payloads are immutable."""
        water = ParsedWaterCommand(amount=237, spoken_unit="ounces")

        with pytest.raises(ValidationError):
            water.amount = 500  # type: ignore[misc]

    def test_quantity_value(self) -> None:
        """Test numeric quantity parsing with default."""
        assert FoodItem(name="rice", quantity="1.5").quantity_value() == 1.5
        assert FoodItem(name="rice").quantity_value() == 1.0
        assert FoodItem(name="rice", quantity="lots").quantity_value(default=2.0) == 2.0


class TestResultVariants:
    """Test the result union accessors."""

    def test_intent_of_payload_result(self) -> None:
        """Test payload results report their intent."""
        result = WaterResult(payload=ParsedWaterCommand(amount=237, spoken_unit="ounces"))

        assert result.kind == "water"
        assert result.intent == CommandIntent.WATER
        assert not result.is_error

    def test_parse_error_intent(self) -> None:
        """Test ParseError reports the intent that failed."""
        error = ParseError(
            original_command="log my weight",
            error_message="Could not understand weight measurement",
            failed_intent=CommandIntent.WEIGHT,
        )

        assert error.intent == CommandIntent.WEIGHT
        assert error.is_error

    def test_parse_error_without_intent(self) -> None:
        """Test ParseError without a failed intent reports UNKNOWN."""
        error = ParseError(original_command="x", error_message="nope")

        assert error.intent == CommandIntent.UNKNOWN

    def test_unknown(self) -> None:
        """Test Unknown carries the command."""
        result = Unknown(command="hello")

        assert result.intent == CommandIntent.UNKNOWN
        assert not result.is_error

    def test_every_intent_has_a_variant(self) -> None:
        """Test every committed intent maps to a result variant."""
        committed = {intent for intent in CommandIntent if intent != CommandIntent.UNKNOWN}

        assert set(RESULT_BY_INTENT) == committed
        for intent, variant in RESULT_BY_INTENT.items():
            assert variant.model_fields["kind"].default == intent.value


class TestSerialization:
    """Test rebuilding results from JSON and dicts."""

    def test_meal_from_json(self, breakfast: ParsedMealCommand) -> None:
        """Test a meal result survives JSON."""
        result = MealResult(payload=breakfast)

        rebuilt = parse_result_from_json(result.model_dump_json())

        assert isinstance(rebuilt, MealResult)
        assert rebuilt == result

    def test_supplement_enum_keys(self) -> None:
        """Test micronutrient keys serialize by name and come back as enums."""
        result = SupplementResult(
            payload=ParsedSupplementCommand(
                supplement_name="d",
                micronutrients={MicronutrientType.VITAMIN_D: 2000.0},
                quantity="2000 IU",
            )
        )

        data = result.model_dump(mode="json")
        assert data["payload"]["micronutrients"] == {"VITAMIN_D": 2000.0}

        rebuilt = parse_result_from_dict(data)
        assert rebuilt.payload.micronutrient_amounts == {MicronutrientType.VITAMIN_D: 2000.0}

    def test_parse_error_from_dict(self) -> None:
        """Test the discriminator selects ParseError."""
        rebuilt = parse_result_from_dict(
            {
                "kind": "parse_error",
                "original_command": "log my weight",
                "error_message": "Could not understand weight measurement",
                "failed_intent": "weight",
            }
        )

        assert isinstance(rebuilt, ParseError)
        assert rebuilt.failed_intent == CommandIntent.WEIGHT

    def test_unknown_kind_rejected(self) -> None:
        """Test an unrecognized kind fails validation."""
        with pytest.raises(ValidationError):
            parse_result_from_dict({"kind": "dance", "command": "x"})


class TestSupplementImmutability:
    """Test supplement payloads are fully immutable."""

    @staticmethod
    def _result() -> SupplementResult:
        return SupplementResult(
            payload=ParsedSupplementCommand(
                supplement_name="vitamin d",
                micronutrients={MicronutrientType.VITAMIN_D: 2000.0},
                quantity="2000 IU",
            )
        )

    def test_amounts_view_rejects_writes(self) -> None:
        """Test the micronutrient view cannot be mutated."""
        payload = self._result().payload

        with pytest.raises(TypeError):
            payload.micronutrient_amounts[MicronutrientType.IRON] = 18.0  # type: ignore[index]

        assert payload.micronutrients == ((MicronutrientType.VITAMIN_D, 2000.0),)

    def test_field_reassignment_rejected(self) -> None:
        """Test the micronutrients field cannot be reassigned."""
        payload = self._result().payload

        with pytest.raises(ValidationError):
            payload.micronutrients = ()  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test equal supplement results hash equally."""
        assert hash(self._result()) == hash(self._result())
        assert len({self._result(), self._result()}) == 1

    def test_pairs_accepted(self) -> None:
        """Test pairs and a mapping build the same payload."""
        from_pairs = ParsedSupplementCommand(
            supplement_name="vitamin d",
            micronutrients=((MicronutrientType.VITAMIN_D, 2000.0),),
            quantity="2000 IU",
        )

        assert from_pairs == self._result().payload


class TestDomainErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Test extraction errors are domain errors."""
        assert issubclass(MissingValueError, ExtractionError)
        assert issubclass(ExtractionError, VoiceCommandError)
        assert issubclass(VoiceCommandError, DomainError)

    def test_missing_value_message(self) -> None:
        """Test the message names the missing field."""
        error = MissingValueError("weight", "weight", "log my weight")

        assert error.intent == "weight"
        assert error.field == "weight"
        assert error.command == "log my weight"
        assert str(error) == "[weight] Could not parse weight from command"
