import logging
from typing import Iterable, List, Optional

from .lines import LineType, parse_lines
from .loader import split_lines
from .ordered import OrderedMap


logger = logging.getLogger(__name__)


class Document(OrderedMap[OrderedMap[str]]):
	"""
	Section name -> ordered key/value map.
	"""

	def __init__(self, pairs=None) -> None:
		super().__init__(OrderedMap, pairs)

	@property
	def sections(self) -> List[str]:
		return list(self)

	def section(self, name: str) -> Optional[OrderedMap[str]]:
		return self.try_get(name)

	def value(self, section: str, key: str) -> Optional[str]:
		values = self.try_get(section)
		if values is None:
			return None
		return values.try_get(key)


class DocumentBuilder:
	def __init__(self, document: Optional[Document] = None) -> None:
		self.document = Document() if document is None else document
		self.current_section: Optional[str] = None
		self.skipped = 0

	def read_lines(self, lines: Iterable[str]) -> None:
		for lineno, item in enumerate(parse_lines(lines), 1):
			if item.type == LineType.SECTION:
				self.current_section = item.key
				self.document.get_or_insert_default(item.key)
			elif item.type == LineType.KEYVALUE:
				if self.current_section is None:
					logger.debug("Line %d: %r outside of any section, skipping", lineno, item.key)
					self.skipped += 1
					continue
				self.document.get_or_insert_default(self.current_section).set(item.key, item.value)
			elif item.type == LineType.UNKNOWN:
				logger.debug("Line %d: unrecognized, skipping", lineno)
				self.skipped += 1

	def read_string(self, text: str) -> None:
		self.read_bytes(text.encode("utf-8"))

	def read_bytes(self, data: bytes, encoding: str = "utf-8", errors: str = "replace") -> None:
		self.read_lines(split_lines(data, encoding, errors))


def build(lines: Iterable[str]) -> Document:
	builder = DocumentBuilder()
	builder.read_lines(lines)
	return builder.document
