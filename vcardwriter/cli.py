"""Format JSON contact records as vCard 3.0 text."""

import logging
import sys
from argparse import ArgumentParser
from dataclasses import replace

import vcardwriter as vw
from vcardwriter.exceptions import RecordError
from vcardwriter.helper import Character as Char
from vcardwriter.helper import FormatOptions, logger


def format_records(records, options, charset=None):
    if charset is not None:
        records = [replace(card, charset=charset) for card in records]
    return Char.CRLF.join(vw.format_vcard(card, options) for card in records)


def write_output(text, out_name=None):
    if out_name is None:
        sys.stdout.write(text)
        sys.stdout.write(Char.CRLF)
        return
    logger.info(f"... Writing {out_name}")
    with open(out_name, "w", encoding="utf-8", newline="") as out:
        out.write(text)
        out.write(Char.CRLF)


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        with open(args.json_file, "r", encoding="utf-8") as f:
            records = vw.records_from_json(f.read(), default_timezone=args.timezone)
    except OSError as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")
    except RecordError as e:
        parser.exit(1, f"{parser.prog}: error: {args.json_file}: {e}\n")

    options = FormatOptions(include_content_type=args.content_type)
    write_output(format_records(records, options, args.charset), args.output)
    return 0


def get_parser():
    parser = ArgumentParser(prog="vcard_format", description="vcard_format writes JSON contact records as vCard 3.0. ")
    parser.add_argument("-V", "--version", action="version", version=vw.VERSION)
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log every property written")
    parser.add_argument(
        "-c",
        "--content-type",
        dest="content_type",
        action="store_true",
        default=False,
        help="Prepend a Content-Type header [default: only when a charset is declared]",
    )
    parser.add_argument("--charset", default=None, help="Declare this charset on every record")
    parser.add_argument("-t", "--timezone", default=None, help="Time zone of revision times without an offset")
    parser.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")
    parser.add_argument("json_file", help="A JSON file holding one record or a list of records")
    return parser


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("Aborted")
