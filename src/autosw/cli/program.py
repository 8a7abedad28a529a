import argparse
import logging

VERSION = "1.0.0"

root_parser = argparse.ArgumentParser(
    prog="autosw",
    description="Smith-Waterman local alignment with a linear gap penalty and the EDNAFULL substitution matrix."
)
root_parser.add_argument(
    "--version",
    action="version",
    version=f"%(prog)s {VERSION}"
)
subparsers = root_parser.add_subparsers(required=True)

def configure_logging(quiet: bool = False):
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

def run():
    # subcommands register themselves on import
    from autosw.cli import align, example
    args = root_parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    run()
