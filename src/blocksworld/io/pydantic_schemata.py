"""Define Pydantic models for validating world, command, and settings YAML files."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Annotated

from blocksworld.grounding.commands import (
    Command,
    Entity,
    Location,
    MoveCommand,
    ObjectDescription,
    PutCommand,
    TakeCommand,
)
from blocksworld.io.yaml_utils import load_yaml_data
from blocksworld.world.configuration import Configuration, WorldState
from blocksworld.world.objects import ObjectDefinition, is_floor

FormName = Literal["ball", "box", "table", "brick", "plank", "pyramid"]
DescribedFormName = Literal["ball", "box", "table", "brick", "plank", "pyramid", "anyform", "floor"]
SizeName = Literal["small", "large"]
RelationName = Literal["ontop", "inside", "above", "below", "leftof", "rightof", "beside"]

# =============================================================================
# World Schemata
# =============================================================================


class ObjectSchema(BaseModel):
    """Schema for the physical definition of an object."""

    form: FormName
    size: Optional[SizeName] = None
    color: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    def to_definition(self) -> ObjectDefinition:
        """Convert the schema into an object definition."""
        return ObjectDefinition(form=self.form, size=self.size, color=self.color)


class WorldSchema(BaseModel):
    """Schema for a snapshot of the blocks world."""

    objects: Dict[str, ObjectSchema]
    stacks: List[List[str]]
    """Columns of object identifiers, each ordered from bottom to top."""

    holding: Optional[str] = None
    arm: int = Field(default=0, ge=0, description="Column index of the arm")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_configuration(self) -> WorldSchema:
        """Validate that every object occupies at most one place and is defined."""
        floors = sorted(obj for obj in self.objects if is_floor(obj))
        if floors:
            raise ValueError(f"Object identifiers are reserved for the floor: {floors}.")

        placed = [obj for stack in self.stacks for obj in stack]
        if self.holding is not None:
            placed.append(self.holding)

        undefined = sorted(set(placed) - set(self.objects))
        if undefined:
            raise ValueError(f"Stacks or arm refer to undefined objects: {undefined}.")

        duplicated = sorted(obj for obj, count in Counter(placed).items() if count > 1)
        if duplicated:
            raise ValueError(f"Objects appear in more than one place: {duplicated}.")

        if self.stacks and self.arm >= len(self.stacks):
            raise ValueError(f"Arm column {self.arm} is outside of {len(self.stacks)} stacks.")

        return self

    def to_world(self) -> WorldState:
        """Convert the schema into a world state."""
        objects = {obj_id: schema.to_definition() for obj_id, schema in self.objects.items()}
        config = Configuration.from_stacks(self.stacks, self.holding, self.arm)
        return WorldState(objects=objects, configuration=config)

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> WorldSchema:
        """Validate a world YAML file and return the resulting schema.

        :param yaml_path: Path to a YAML file to be validated by the schema
        :return: Validated WorldSchema instance
        """
        yaml_data = load_yaml_data(yaml_path)

        try:
            return WorldSchema.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err


# =============================================================================
# Command Schemata
# =============================================================================


class ObjectDescriptionSchema(BaseModel):
    """Schema for an object description (absent attributes match anything)."""

    form: Optional[DescribedFormName] = None
    size: Optional[SizeName] = None
    color: Optional[str] = None
    location: Optional[LocationSchema] = None

    model_config = ConfigDict(extra="forbid")

    def to_description(self) -> ObjectDescription:
        """Convert the schema into an object description."""
        location = None if self.location is None else self.location.to_location()
        return ObjectDescription(self.form, self.size, self.color, location)


class EntitySchema(BaseModel):
    """Schema for a quantified object description."""

    quantifier: Literal["the", "any", "all"] = "the"
    description: ObjectDescriptionSchema = Field(alias="object")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_entity(self) -> Entity:
        """Convert the schema into an entity."""
        return Entity(self.description.to_description(), self.quantifier)


class LocationSchema(BaseModel):
    """Schema for a spatial relation to an entity."""

    relation: RelationName
    entity: EntitySchema

    model_config = ConfigDict(extra="forbid")

    def to_location(self) -> Location:
        """Convert the schema into a location."""
        return Location(self.relation, self.entity.to_entity())


class TakeCommandSchema(BaseModel):
    """Schema for a command to take an object."""

    command: Literal["take"]
    entity: EntitySchema

    model_config = ConfigDict(extra="forbid")

    def to_command(self) -> TakeCommand:
        """Convert the schema into a take command."""
        return TakeCommand(self.entity.to_entity())


class MoveCommandSchema(BaseModel):
    """Schema for a command to move an object to a location."""

    command: Literal["move"]
    entity: EntitySchema
    location: LocationSchema

    model_config = ConfigDict(extra="forbid")

    def to_command(self) -> MoveCommand:
        """Convert the schema into a move command."""
        return MoveCommand(self.entity.to_entity(), self.location.to_location())


class PutCommandSchema(BaseModel):
    """Schema for a command to put the held object at a location."""

    command: Literal["put"]
    location: LocationSchema

    model_config = ConfigDict(extra="forbid")

    def to_command(self) -> PutCommand:
        """Convert the schema into a put command."""
        return PutCommand(self.location.to_location())


CommandSchema = Annotated[
    Union[TakeCommandSchema, MoveCommandSchema, PutCommandSchema],
    Field(discriminator="command"),
]


class CandidateCommandsSchema(BaseModel):
    """Schema for the candidate parses of a single user utterance."""

    utterance: Optional[str] = None
    """The utterance that was parsed (optional, used for display only)."""

    candidates: List[CommandSchema] = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")

    def to_commands(self) -> list[Command]:
        """Convert every candidate schema into a command."""
        return [candidate.to_command() for candidate in self.candidates]

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> CandidateCommandsSchema:
        """Validate a YAML file of candidate commands and return the resulting schema.

        :param yaml_path: Path to a YAML file to be validated by the schema
        :return: Validated CandidateCommandsSchema instance
        """
        yaml_data = load_yaml_data(yaml_path)

        try:
            return CandidateCommandsSchema.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err


ObjectDescriptionSchema.model_rebuild()
EntitySchema.model_rebuild()
LocationSchema.model_rebuild()

# =============================================================================
# Planner Settings Schemata
# =============================================================================


class PlannerSettings(BaseModel):
    """Settings controlling the search for plans."""

    timeout_s: float = Field(default=10.0, ge=0, description="Time allowed per search (seconds)")
    log_every_n_steps: int = Field(default=1000, gt=0, description="Search steps between logs")

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> PlannerSettings:
        """Load planner settings from the `planner` key of a YAML file.

        :param yaml_path: Path to a YAML file containing a top-level `planner` key
        :return: Validated PlannerSettings instance
        """
        yaml_data = load_yaml_data(yaml_path, required_keys={"planner"})

        try:
            return PlannerSettings.model_validate(yaml_data["planner"])
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err
