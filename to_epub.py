#!/usr/bin/env python3
import sys
import argparse
import subprocess

# Usage: python to_epub.py [--dry-run] [--ignore-status]

BANNER = "Converting to epub"

PANDOC = "pandoc"
STYLESHEET = "mystyle.css"
OUTPUT = "main.epub"

CMD_PREFIX = f"{PANDOC} --epub-stylesheet={STYLESHEET} -S -o {OUTPUT} "

# Book order; every entry carries its own trailing space.
CONTENTS = (
    "splash.html ",
    "contents.html ",
    "chapter1_introduction.html ",
    "chapter2_installation.html ",
    "chapter3_basics.html ",
    "chapter4_interactive_prompt.html ",
    "chapter5_languages.html ",
    "chapter6_parsing.html ",
    "chapter7_evaluation.html ",
    "chapter8_error_handling.html ",
    "chapter9_s_expressions.html ",
    "chapter10_q_expressions.html ",
    "chapter11_variables.html ",
    "chapter12_functions.html ",
    "chapter13_conditionals.html ",
    "chapter14_strings.html ",
    "chapter15_standard_library.html ",
    "chapter16_bonus_projects.html ",
    "credits.html ",
    "appendix_a_hand_rolled_parser.html ",
)

# shell conventions for "command not found" and "cannot execute"
NOT_FOUND_STATUS = 127
NOT_EXECUTABLE_STATUS = 126


def build_command(contents):
    """Return the pandoc command line as one string, prefix first."""
    return CMD_PREFIX + "".join(contents)


def build_argv(contents):
    """Same command as build_command(), split into an argument vector."""
    argv = [PANDOC, f"--epub-stylesheet={STYLESHEET}", "-S", "-o", OUTPUT]
    argv.extend(entry.strip() for entry in contents)
    return argv


def run(contents, dry_run=False, ignore_status=False) -> int:
    """
    Print the banner and the command, then run pandoc and wait for it.
    Returns pandoc's exit status, or 0 for a dry run or when ignore_status
    is set.
    """
    print(BANNER)
    print(build_command(contents))
    sys.stdout.flush()

    if dry_run:
        return 0

    try:
        status = subprocess.run(build_argv(contents)).returncode
    except FileNotFoundError:
        print(f"to_epub: {PANDOC} not found on PATH", file=sys.stderr)
        status = NOT_FOUND_STATUS
    except OSError as e:
        print(f"to_epub: cannot execute {PANDOC}: {e.strerror}", file=sys.stderr)
        status = NOT_EXECUTABLE_STATUS
    else:
        if status < 0:
            print(f"to_epub: {PANDOC} killed by signal {-status}",
                  file=sys.stderr)
            status = 128 - status
        elif status != 0:
            print(f"to_epub: {PANDOC} exited with status {status}",
                  file=sys.stderr)

    return 0 if ignore_status else status


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description=f"Merge the book's HTML chapters into {OUTPUT} with pandoc.")
    parser.add_argument("-n", "--dry-run", action="store_true",
                        help="print the command without running it")
    parser.add_argument("--ignore-status", action="store_true",
                        help="always exit 0, whatever pandoc returns")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    return run(CONTENTS, dry_run=args.dry_run, ignore_status=args.ignore_status)


if __name__ == "__main__":
    sys.exit(main())
