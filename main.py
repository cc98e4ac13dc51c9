# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import argparse
import os
import re
import sys

from number_words import MAX_MAGNITUDE, ConjunctionMode, NumberWordsError, convert, parse_numeral
from number_words.core.logger import LOG_LEVELS, auto_setup, get_logger, setup_logging
from number_words.english.conjunction import FLAG_CHOICES

NUMERAL_SHAPE = re.compile(r"[+-]?[0-9][0-9,_]*")

EXAMPLE_INPUTS = ["234", "92,582,349", "543_953_459_343", "8"]

logger = get_logger("number_words.cli")


def convert_numerals(numerals, mode=ConjunctionMode.ALWAYS, minimal=False):
    """
    Convert numeral strings, collecting failures instead of stopping

    Args:
        numerals (list[str]): numeral strings in input order
        mode (ConjunctionMode): conjunction mode for every numeral
        minimal (bool): output bare words instead of "<numeral>: <words>"

    Returns:
        tuple: (output_lines, error_messages)
    """
    lines = []
    errors = []
    for text in numerals:
        try:
            parsed = parse_numeral(text)
            words = convert(parsed.magnitude, parsed.is_negative, mode)
        except NumberWordsError as e:
            logger.debug(f"Failed to convert {text!r}: {e}")
            errors.append(str(e))
            continue
        lines.append(words if minimal else f"{parsed.text}: {words}")
    return lines, errors


def example_session(inputs, prog_name):
    """Render a sample command line and its output for the help text"""
    lines, _ = convert_numerals(inputs)
    command_line = " ".join([prog_name] + list(inputs))
    return "$ {}\n{}".format(command_line, "\n".join(lines))


def build_parser(prog_name=None):
    prog_name = prog_name or os.path.basename(sys.argv[0]) or "number-words"
    epilog = (
        "Example:\n\n"
        f"{example_session(EXAMPLE_INPUTS, prog_name)}\n\n"
        "Negative numerals may use separators too, e.g. -1,000.\n"
        "Every argument after -- is read as a numeral.\n\n"
        f"Note: maximum value supported is {MAX_MAGNITUDE}\n"
        f"({convert(MAX_MAGNITUDE)})"
    )
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="numbers into words: converts integers to English words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(
        "numerals",
        nargs="*",
        metavar="NUMBER",
        help='Integers to convert; "," and "_" separators are allowed',
    )
    parser.add_argument(
        "--and",
        dest="and_mode",
        type=str.lower,
        choices=FLAG_CHOICES,
        default=ConjunctionMode.ALWAYS.value,
        help='Where to use "and": none, last (last group only), '
        "below1k (only numbers under 1000) or all (default: all)",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="Print only the words, without the input numeral",
    )
    parser.add_argument("--file", help="File with one numeral per line, converted after NUMBER")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        help="Log level (default: $NUMBER_WORDS_LOG_LEVEL or WARNING)",
    )
    return parser


def split_trailing_numerals(argv):
    """Split off everything after the first "--" as literal numerals"""
    argv = list(argv)
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def protect_signed_numerals(argv):
    """
    Swap numeral-shaped arguments such as "-1,000" for placeholders

    argparse reads a leading "-" as an option prefix unless the rest is plain
    digits. NUL never occurs in a real argument, so the placeholders cannot
    clash with user input.

    Returns:
        tuple: (argv with placeholders, {placeholder: original})
    """
    protected = []
    originals = {}
    for index, arg in enumerate(argv):
        if arg.startswith("-") and NUMERAL_SHAPE.fullmatch(arg):
            placeholder = f"\0{index}"
            originals[placeholder] = arg
            arg = placeholder
        protected.append(arg)
    return protected, originals


def read_numerals_file(path):
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def main(argv=None):
    """Convert command-line numerals to words.

    Returns 0 when every numeral converts, 1 otherwise. Invalid flags exit
    with status 2 through argparse.
    """
    parser = build_parser()
    argv, trailing = split_trailing_numerals(sys.argv[1:] if argv is None else argv)
    argv, originals = protect_signed_numerals(argv)
    args = parser.parse_intermixed_args(argv)

    if args.log_level:
        setup_logging(level=args.log_level, force=True)
    else:
        auto_setup(force=True)

    numerals = [originals.get(arg, arg) for arg in args.numerals] + trailing
    if args.file:
        try:
            numerals.extend(read_numerals_file(args.file))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1

    if not numerals:
        print("Error: no numbers given\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    mode = ConjunctionMode.from_flag(args.and_mode)
    logger.info(f"Converting {len(numerals)} numeral(s), and-mode={mode}")
    lines, errors = convert_numerals(numerals, mode, args.minimal)

    for line in lines:
        print(line)
    if errors:
        print("Errors\n-----\n" + "\n".join(errors), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
