# /run_pathway.py

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from pathway.config import settings
from pathway.errors import PathwayGenerationError
from pathway.service import build_pathway_service


def main():
    """
    Seeds the graph, generates a pathway and prints it as JSON.
    """
    load_dotenv()

    parser = argparse.ArgumentParser(description="Generate a learning pathway towards a target role.")
    parser.add_argument("--skills", nargs="*", default=[], help="Skills you already have.")
    parser.add_argument("--role", help="Exact name of the target role.")
    parser.add_argument("--offline", action="store_true",
                        help="Skip intelligent search and URL validation.")
    parser.add_argument("--list-roles", action="store_true", help="Print the available roles and exit.")
    args = parser.parse_args()

    assembler = build_pathway_service(settings, offline=args.offline)

    if args.list_roles:
        print(json.dumps(assembler.available_roles(), indent=2))
        return 0

    if not args.role:
        parser.error("--role is required unless --list-roles is given")

    try:
        pathway = asyncio.run(assembler.generate_pathway(args.skills, args.role))
    except PathwayGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(pathway.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
