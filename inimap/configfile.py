from typing import Iterator, List, Optional, Type, TypeVar

from .document import Document, build
from .loader import read_lines, split_lines
from .ordered import OrderedMap


ConfigFile = TypeVar("ConfigFile", bound="IniConfig")


class IniConfig:
	"""
	A parsed INI file.

	The whole file is read and parsed on construction. Lookups never raise
	for missing sections or keys; they return None (or the given default).
	"""

	@classmethod
	def from_bytes(cls: Type[ConfigFile], data: bytes, encoding: str = "utf-8") -> ConfigFile:
		ret = cls.__new__(cls)
		ret.path = None
		ret.encoding = encoding
		ret._document = build(split_lines(data, encoding))
		return ret

	@classmethod
	def from_string(cls: Type[ConfigFile], text: str) -> ConfigFile:
		return cls.from_bytes(text.encode("utf-8"))

	def __init__(self, path: str, encoding: str = "utf-8") -> None:
		self.path: Optional[str] = path
		self.encoding = encoding
		self._document = build(read_lines(path, encoding))

	def __repr__(self):
		return f"<{self.__class__.__name__}: {self.path!r} {self.sections}>"

	def __contains__(self, section: str) -> bool:
		return section in self._document

	def __iter__(self) -> Iterator[str]:
		return iter(self.sections)

	def __len__(self) -> int:
		return len(self._document)

	@property
	def document(self) -> Document:
		return self._document

	@property
	def sections(self) -> List[str]:
		return self._document.sections

	def section(self, name: str) -> Optional[OrderedMap[str]]:
		values = self._document.section(name)
		if values is None:
			return None
		# Hand out a copy so the parsed file stays untouched
		return OrderedMap(str, values)

	def value(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
		ret = self._document.value(section, key)
		return default if ret is None else ret

	def read(self, document: Document) -> None:
		"""
		Fold the parsed contents into an existing document. Sections already
		present in `document` keep their position and get their keys updated.
		"""
		for name, values in self._document.items():
			document.get_or_insert_default(name).update(values)
