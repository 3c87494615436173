"""
`sentiment:getRate(text)` as a host-pluggable function extension.

A host configures the function once with the declared types of its arguments
(init), then calls execute() once per event. Validation happens at init and
never per call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from .errors import ConfigurationError
from .lexicon_model import Lexicon, load_lexicon


class AttributeType(str, Enum):
    STRING = "STRING"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOL = "BOOL"
    OBJECT = "OBJECT"


@dataclass(frozen=True)
class Parameter:
    name: str
    description: str
    types: Tuple[AttributeType, ...]


@dataclass(frozen=True)
class ExtensionInfo:
    name: str
    namespace: str
    description: str
    parameters: Tuple[Parameter, ...]
    return_types: Tuple[AttributeType, ...]
    return_description: str
    examples: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}:{self.name}"


EXTENSION = ExtensionInfo(
    name="getRate",
    namespace="sentiment",
    description="This provides the sentiment value for a given string as per the AFINN word list.",
    parameters=(
        Parameter("text", "The input text for which the sentiment value should be derived.",
                  (AttributeType.STRING,)),
    ),
    return_types=(AttributeType.INT,),
    return_description="This returns the sentiment value for the provided string.",
    examples=(
        ("getRate('George is a good person')",
         "This returns the sentiment value for the given input string by referring "
         "to the AFINN word list. In this scenario, the output is 3."),
    ),
)


def validate_arguments(arg_types: Sequence[AttributeType]) -> None:
    if len(arg_types) != 1:
        raise ConfigurationError(
            f"Invalid no of arguments passed to {EXTENSION.qualified_name}() function, "
            f"required 1, but found {len(arg_types)}"
        )
    found = arg_types[0]
    name = found.value if isinstance(found, AttributeType) else str(found)
    # hosts may declare types as plain strings ("STRING", "string")
    if name.upper() != AttributeType.STRING.value:
        raise ConfigurationError(f"First parameter should be of type string. But found {name}")


class GetRate:
    info = EXTENSION

    def __init__(self):
        self._lexicon: Optional[Lexicon] = None

    def init(self, arg_types: Sequence[AttributeType], lexicon: Optional[Lexicon] = None,
             lexicon_path: Optional[str] = None, strict: bool = False) -> "GetRate":
        """Validate the declared arguments, then load (or adopt) the lexicon."""
        validate_arguments(arg_types)
        self._lexicon = lexicon if lexicon is not None else load_lexicon(lexicon_path, strict=strict)
        return self

    @property
    def return_type(self) -> AttributeType:
        return AttributeType.INT

    @property
    def lexicon(self) -> Lexicon:
        if self._lexicon is None:
            raise ConfigurationError(f"{self.info.qualified_name}() used before init()")
        return self._lexicon

    def execute(self, data) -> int:
        return self.lexicon.score("" if data is None else str(data))

    def execute_many(self, rows: Iterable) -> List[int]:
        lex = self.lexicon
        return [lex.score("" if d is None else str(d)) for d in rows]


REGISTRY: Dict[str, Type[GetRate]] = {EXTENSION.qualified_name: GetRate}

def create(qualified_name: str) -> GetRate:
    try:
        return REGISTRY[qualified_name]()
    except KeyError:
        raise ConfigurationError(f"No extension found for {qualified_name}") from None
