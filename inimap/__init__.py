from typing import IO, Union

from .configfile import IniConfig
from .document import Document, DocumentBuilder, build
from .exceptions import FileError, InimapException
from .lines import ClassifiedLine, LineType, classify
from .loader import read_lines, split_lines
from .ordered import OrderedMap


__all__ = [
	"ClassifiedLine", "Document", "DocumentBuilder", "FileError", "IniConfig",
	"InimapException", "LineType", "OrderedMap", "build", "classify", "load",
	"load_document", "loads",
]


def load_document(path: str, encoding: str = "utf-8") -> Document:
	return build(read_lines(path, encoding))


def load(fp: IO) -> Document:
	return loads(fp.read())


def loads(data: Union[str, bytes]) -> Document:
	if isinstance(data, str):
		data = data.encode("utf-8")
	return build(split_lines(data))
