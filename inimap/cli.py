import json
import logging
import sys
from argparse import ArgumentParser
from typing import Dict, List, Optional

import toml

from .configfile import IniConfig
from .exceptions import FileError
from .ordered import OrderedMap


def to_dict(values: OrderedMap) -> Dict:
	return {
		key: to_dict(value) if isinstance(value, OrderedMap) else value
		for key, value in values.items()
	}


class App:
	def __init__(self, args: List[str]) -> None:
		p = ArgumentParser(prog="inimap", description="Inspect an INI file")
		p.add_argument("path")
		p.add_argument("section", nargs="?")
		p.add_argument("key", nargs="?")
		p.add_argument("--format", choices=["json", "toml"], default="json")
		p.add_argument("--encoding", default="utf-8")
		p.add_argument("-v", "--verbose", action="store_true", help="Report skipped lines")
		self.args = p.parse_args(args)

		logging.basicConfig(
			level=logging.DEBUG if self.args.verbose else logging.WARNING,
			format="%(name)s: %(message)s",
		)

	def dump(self, data: Dict) -> None:
		if self.args.format == "toml":
			print(toml.dumps(data), end="")
		else:
			print(json.dumps(data, indent=4))

	def run(self) -> int:
		try:
			config = IniConfig(self.args.path, encoding=self.args.encoding)
		except FileError as e:
			print(f"FATAL: {e}", file=sys.stderr)
			return 2

		if self.args.section is None:
			self.dump(to_dict(config.document))
			return 0

		section = config.section(self.args.section)
		if section is None:
			print(f"No such section: {self.args.section!r}", file=sys.stderr)
			return 1

		if self.args.key is None:
			if self.args.format == "toml":
				# TOML needs a table header to hold the keys
				self.dump({self.args.section: to_dict(section)})
			else:
				self.dump(to_dict(section))
			return 0

		value = section.try_get(self.args.key)
		if value is None:
			print(f"No such key: {self.args.section!r} {self.args.key!r}", file=sys.stderr)
			return 1

		print(value)
		return 0


def main(argv: Optional[List[str]] = None) -> None:
	app = App(sys.argv[1:] if argv is None else argv)
	sys.exit(app.run())


if __name__ == "__main__":
	main()
