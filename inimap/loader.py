from typing import List

from .exceptions import FileError
from .utils import UTF8_BOM


def has_bom(data: bytes) -> bool:
	return data[:3] == UTF8_BOM


def split_lines(data: bytes, encoding: str = "utf-8", errors: str = "replace") -> List[str]:
	"""
	Split raw file content into logical lines.

	A leading UTF-8 BOM is skipped. Every "\\r" and NUL byte is dropped, and
	the fragment after the last "\\n" is always kept, even when empty.
	"""
	if has_bom(data):
		data = data[3:]

	return [
		segment.replace(b"\r", b"").replace(b"\0", b"").decode(encoding, errors)
		for segment in data.split(b"\n")
	]


def read_lines(path: str, encoding: str = "utf-8", errors: str = "replace") -> List[str]:
	try:
		with open(path, "rb") as f:
			data = f.read()
	except OSError as e:
		raise FileError(path, e.strerror or str(e)) from e

	return split_lines(data, encoding, errors)
