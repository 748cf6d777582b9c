import os
from typing import IO


def get_resource(path: str, mode="r") -> IO:
	return open(get_resource_path(path), mode)


def get_resource_path(path: str) -> str:
	return os.path.join(os.path.dirname(__file__), "res", path)
