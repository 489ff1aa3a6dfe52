# Copyright © 2024–2026 CZ.NIC, z. s. p. o.
#
# This file is part of Yangstruct.
#
# Yangstruct is free software: you can redistribute it and/or modify it under
# the terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# Yangstruct is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with Yangstruct.  If not, see <http://www.gnu.org/licenses/>.

"""This module defines the entry point for a JSON merging script."""

import argparse
import json
import os
import sys
import importlib.metadata
from typing import Optional
from yangstruct.exceptions import JSONMergeError
from yangstruct.render import INDENT, merge_json


def main(infiles: Optional[list[str]] = None,
         indent: Optional[str] = None) -> int:
    """Entry-point for the command-line utility.

    The JSON objects in the input files are merged in the given order
    and the result is written to standard output.

    Args:
        infiles: Names of files with JSON projections of struct trees.
        indent: Indentation string of the output.

    Returns:
        Numeric return code (0=no error, 2=merge error, 1=other)
    """
    if infiles is None:
        parser = argparse.ArgumentParser(
            prog="yangstruct",
            description="Merge JSON projections of YANG data trees.")
        parser.add_argument(
            "-V", "--version", action="version",
            version=f"%(prog)s {importlib.metadata.version('yangstruct')}")
        parser.add_argument(
            "infiles", metavar="INFILE", nargs="+",
            help="file name with a JSON-encoded data tree")
        parser.add_argument(
            "-i", "--indent",
            help=("indentation string of the output"
                  " (default: $YANGSTRUCT_INDENT or three spaces)"))
        args = parser.parse_args()
        infiles = args.infiles
        indent = args.indent
    ind = indent if indent is not None else os.environ.get(
        "YANGSTRUCT_INDENT", INDENT)
    res = {}
    for infile in infiles:
        try:
            with open(infile, encoding="utf-8") as inf:
                obj = json.load(inf)
        except (FileNotFoundError, PermissionError, UnicodeDecodeError,
                json.decoder.JSONDecodeError) as e:
            print("Input file:", str(e), file=sys.stderr)
            return 1
        if not isinstance(obj, dict):
            print("Input file:", infile, "doesn't contain a JSON object",
                  file=sys.stderr)
            return 1
        try:
            res = merge_json(res, obj)
        except JSONMergeError as e:
            print("Merge error:", str(e), file=sys.stderr)
            return 2
    print(json.dumps(res, indent=ind, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
