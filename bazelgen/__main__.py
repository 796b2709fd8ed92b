from argparse import ArgumentParser
import logging
import sys

from bazelgen import Config
from bazelgen.details.loader import load_project
from bazelgen.details.tools.generate import generate_main
from bazelgen.details.tools.graph import graph_main
from bazelgen.details.tools.validate import validate_main


def main(argv=None):
    COMMANDS = {
        "generate": generate_main,
        "graph": graph_main,
        "validate": validate_main,
    }
    parser = ArgumentParser(prog="bazelgen")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--project", type=str, required=True)
    parser.add_argument("--build-file-name", type=str, default="BUILD.bazel")
    parser.add_argument("--bundle-id-prefix", type=str, default="to.do")
    parser.add_argument("--minimum-os-version", type=str, default="13.0")
    parser.add_argument(
        "--device-family", action="append", default=[], choices=["iphone", "ipad"]
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = Config(
        build_file_name=args.build_file_name,
        bundle_id_prefix=args.bundle_id_prefix,
        minimum_os_version=args.minimum_os_version,
        device_family=args.device_family or "iphone",
    )
    project = load_project(args.project)
    exit_code = COMMANDS[args.command](project=project, config=config)
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
