class InimapException(Exception):
	pass


class FileError(InimapException, OSError):
	def __init__(self, path: str, reason: str = "") -> None:
		self.path = path
		message = f"Could not read {path!r}"
		if reason:
			message += f": {reason}"
		super().__init__(message)
