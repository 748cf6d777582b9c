WHITESPACE = " \t\n\r\f\v"

UTF8_BOM = b"\xef\xbb\xbf"


def trim(text: str) -> str:
	return text.strip(WHITESPACE)


def ascii_lower(text: str) -> str:
	"""
	Lower-case ASCII letters only, leaving any other character untouched
	"""
	return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def normalize_key(key: str) -> str:
	return ascii_lower(trim(key))
