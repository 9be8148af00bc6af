from typing import Literal, Tuple


type TFormat = Literal[
    "extended",
    "basic",
]

type TRepresentation = Literal[
    "complete",
    "date",
    "time",
]

FORMAT_VALUES: Tuple[TFormat, ...] = ("extended", "basic")
REPRESENTATION_VALUES: Tuple[TRepresentation, ...] = ("complete", "date", "time")
