from collections import namedtuple
from enum import IntEnum
from typing import Iterable, Iterator

from .utils import trim


class LineType(IntEnum):
	EMPTY = 0
	COMMENT = 1
	SECTION = 2
	KEYVALUE = 3
	UNKNOWN = 4


# For SECTION lines, `key` holds the section name
ClassifiedLine = namedtuple("ClassifiedLine", ["type", "key", "value"])

EMPTY = ClassifiedLine(LineType.EMPTY, "", "")
COMMENT = ClassifiedLine(LineType.COMMENT, "", "")
UNKNOWN = ClassifiedLine(LineType.UNKNOWN, "", "")


def classify(line: str) -> ClassifiedLine:
	line = trim(line)
	if not line:
		return EMPTY

	# Comment lines win over anything they contain, "=" included
	if line.startswith(";"):
		return COMMENT

	if line.startswith("["):
		end = line.find("]")
		if end == -1:
			return UNKNOWN
		return ClassifiedLine(LineType.SECTION, trim(line[1:end]), "")

	line, _, _ = line.partition(";")
	key, sep, value = trim(line).partition("=")
	if not sep:
		return UNKNOWN

	return ClassifiedLine(LineType.KEYVALUE, trim(key), trim(value))


def parse_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
	for line in lines:
		yield classify(line)
