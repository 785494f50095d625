import dataclasses

import pytest

from zoo_modelado import Animal, InvalidArgumentError


class TestAnimalBuilder:
    """Construcción de animales con el builder."""

    def test_build_keeps_supplied_fields(self):
        animal = Animal.Builder("Lion").age(5).build()

        assert animal.species == "Lion"
        assert animal.age == 5

    def test_age_defaults_to_zero(self):
        assert Animal.Builder("Lion").build().age == 0

    def test_zero_age_is_allowed(self):
        assert Animal.Builder("Lion").age(0).build().age == 0

    def test_negative_age_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="age cannot be negative") as exc_info:
            Animal.Builder("Lion").age(-1).build()

        assert exc_info.value.field == "age"

    @pytest.mark.parametrize("age", [1.5, "3", None, True])
    def test_non_integer_age_is_rejected(self, age):
        with pytest.raises(InvalidArgumentError, match="age must be an integer"):
            Animal.Builder("Lion").age(age).build()

    @pytest.mark.parametrize("species", [None, "", "  "])
    def test_blank_species_is_rejected(self, species):
        with pytest.raises(InvalidArgumentError, match="species cannot be None or empty"):
            Animal.Builder(species).age(3).build()

    def test_species_is_checked_before_age(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Animal.Builder("").age(-1).build()

        assert exc_info.value.field == "species"

    def test_setter_returns_same_builder(self):
        builder = Animal.Builder("Lion")

        assert builder.age(2) is builder


class TestAnimalValue:
    """Igualdad, hash e inmutabilidad."""

    def test_equal_animals_share_hash(self):
        first = Animal("Lion", 5)
        second = Animal.Builder("Lion").age(5).build()

        assert first == second
        assert hash(first) == hash(second)

    def test_not_equal_when_age_differs(self):
        assert Animal("Lion", 5) != Animal("Lion", 6)

    def test_not_equal_when_species_differs(self):
        assert Animal("Lion", 5) != Animal("Tiger", 5)

    def test_is_immutable(self):
        animal = Animal("Lion", 5)

        with pytest.raises(dataclasses.FrozenInstanceError):
            animal.age = 6

    def test_invalid_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Animal("Lion", -3)
