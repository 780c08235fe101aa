"""WebPlay: actors, abilities, actions and questions on top of WebScope."""

from webplay.abilities import Ability
from webplay.abilities.browse_the_web import BrowseTheWeb
from webplay.actions import Action
from webplay.actions.keyboard import Check, Fill, Press, Select, Type
from webplay.actions.navigate import Navigate, Wait
from webplay.actions.pointer import Click, DoubleClick, DragAndDrop, Hover
from webplay.actions.storage import Add, Clear, Get, Remove, Set
from webplay.actor import Actor
from webplay.exceptions import (
    MissingAbilityError,
    RequestError,
    ScreenplayError,
    UnknownStateError,
)
from webplay.questions import Question
from webplay.questions.element import Element
from webplay.questions.page import Page

__version__ = "0.1.0"

__all__ = [
    "Ability",
    "Action",
    "Actor",
    "Add",
    "BrowseTheWeb",
    "Check",
    "Clear",
    "Click",
    "DoubleClick",
    "DragAndDrop",
    "Element",
    "Fill",
    "Get",
    "Hover",
    "MissingAbilityError",
    "Navigate",
    "Page",
    "Press",
    "Question",
    "Remove",
    "RequestError",
    "ScreenplayError",
    "Select",
    "Set",
    "Type",
    "UnknownStateError",
    "Wait",
    "__version__",
]
