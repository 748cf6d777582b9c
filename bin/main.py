#!/usr/bin/env python
import os
import sys


def main():
	sys.path.append(os.path.abspath("."))

	from inimap.cli import main as inimap_main
	inimap_main(sys.argv[1:])


if __name__ == "__main__":
	main()
