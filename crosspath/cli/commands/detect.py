"""crosspath detect: classify the encoding of raw path bytes."""

import json
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

from crosspath.cli.commands.base import BaseCommand
from crosspath.cli.exit_codes import ExitCode
from crosspath.cli.output import print_field, print_result
from crosspath.cli.parser import build_config
from crosspath.encoding import decode_path_bytes, detect_encoding
from crosspath.models import DetectedEncoding


class DetectCommand(BaseCommand):
    """crosspath detect [FILE] [--json]"""

    @property
    def name(self) -> str:
        return "detect"

    @property
    def description(self) -> str:
        return "Detect the encoding of path bytes read from FILE or stdin"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("file", nargs="?", metavar="FILE", help="File holding the path bytes")
        parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    def execute(self, args: Namespace) -> int:
        config = build_config(args)
        if args.file and args.file != "-":
            data = Path(args.file).read_bytes()
        else:
            data = sys.stdin.buffer.read()

        # Files and pipes usually end with one line break that is not part of the path
        utf16 = detect_encoding(data) is DetectedEncoding.UTF16LE
        if not utf16:
            data = _strip_line_break(data, b"\r\n", b"\n")
        result = decode_path_bytes(data, preserve_encoding=config.preserve_encoding)
        text = _strip_line_break(result.text, "\r\n", "\n") if utf16 else result.text

        if args.json:
            payload = result.to_dict()
            payload["text"] = text
            print_result(json.dumps(payload, ensure_ascii=False))
            return ExitCode.SUCCESS

        print_field("encoding", result.encoding.display_name)
        print_field("lossy", "yes" if result.lossy else "no")
        print_field("text", text)
        for warning in result.warnings:
            print_field("warning", warning)
        return ExitCode.SUCCESS


def _strip_line_break(data, crlf, lf):
    if data.endswith(crlf):
        return data[: -len(crlf)]
    if data.endswith(lf):
        return data[: -len(lf)]
    return data
