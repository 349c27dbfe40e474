"""Conway notation - the specification builder and notation parser."""

from .specification import (
    Operation,
    Specification,
    ConwayDescription,
    encode_notation,
    parse_notation,
)
