"""Variables — именованные, валидируемые, наблюдаемые значения с историей.

- Variable: единая точка присваивания (domain → delegate → value/history → monitors)
- History: ограниченный временной ряд (time, value)
- Namespace: иерархические пространства имён
"""

from .history import DEFAULT_HISTORY_CAPACITY, History, HistoryEntry
from .namespace import DEFAULT_SEPARATOR, AsNameable, Nameable, Named, Namespace
from .variable import (
    AssignmentOutcome,
    AssignmentResult,
    Variable,
    VariableDelegate,
)

__all__ = [
    "Variable",
    "VariableDelegate",
    "AssignmentOutcome",
    "AssignmentResult",
    "History",
    "HistoryEntry",
    "DEFAULT_HISTORY_CAPACITY",
    "Nameable",
    "Named",
    "AsNameable",
    "Namespace",
    "DEFAULT_SEPARATOR",
]
