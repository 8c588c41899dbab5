"""Sequencing engine — Flow, the Action protocol, Blocks and the Routine."""

from routine.engine.action import Action, Collectable, Labelled, flatten_actions
from routine.engine.block import Block
from routine.engine.errors import InvalidDefinitionError
from routine.engine.flow import EndBehavior, Flow
from routine.engine.properties import Properties
from routine.engine.routine import Routine

__all__ = [
    "Action",
    "Block",
    "Collectable",
    "EndBehavior",
    "Flow",
    "InvalidDefinitionError",
    "Labelled",
    "Properties",
    "Routine",
    "flatten_actions",
]
