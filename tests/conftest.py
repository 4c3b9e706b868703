"""Make the shared blocks-world fixtures available to every test module."""

from .fixtures.world_fixtures import ball_and_table_world, single_box_world, small_world

__all__ = ["ball_and_table_world", "single_box_world", "small_world"]
