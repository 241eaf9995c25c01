# src/jclaw_console/interfaces/__init__.py
from .navigator import INavigator
from .prompt import IOperatorPrompt

__all__ = [
    "INavigator",
    "IOperatorPrompt",
]
