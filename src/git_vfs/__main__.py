"""
Demonstration driver.

Runs a fixed sequence of calls against a fresh GitVfs:
fingerprint and store a blob, read it back, create a ref, point HEAD
at it, then move the ref and read it again.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .engine import GitVfs
from .errors import GitVfsError
from .integrity.hashing import SUPPORTED_ALGORITHMS, compute_hash
from .integrity.identifiers import digest_identifier, length_identifier

logger = logging.getLogger(__name__)

DEFAULT_DATA = "Hello, git virtual world!"
DEFAULT_REF = "refs/heads/main"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git_vfs",
        description="Exercise the in-memory git object store.",
    )
    parser.add_argument("--data", default=DEFAULT_DATA, help="blob content to store")
    parser.add_argument("--ref", default=DEFAULT_REF, help="reference name to create")
    parser.add_argument(
        "--new-target",
        default="new_hash",
        help="identifier the reference is moved to",
    )
    parser.add_argument(
        "--algorithm",
        choices=SUPPORTED_ALGORITHMS,
        default="sha256",
        help="hash algorithm for the content fingerprint",
    )
    parser.add_argument(
        "--digest-ids",
        action="store_true",
        help="address blobs by SHA-256 digest instead of length",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each step")
    return parser


def run_demo(vfs: GitVfs, data: bytes, ref_name: str, new_target: str, algorithm: str) -> dict:
    """Run the demo sequence and return what was observed."""
    fingerprint = compute_hash(data, algorithm)
    logger.info("fingerprinted %d bytes with %s", len(data), algorithm)

    blob_id = vfs.create_blob(data)
    logger.info("created blob %s", blob_id)
    content = vfs.get_object(blob_id)

    vfs.create_ref(ref_name, blob_id)
    vfs.set_head(ref_name)
    head = vfs.get_head()
    target = vfs.get_ref(head)
    logger.info("HEAD -> %s -> %s", head, target)

    vfs.update_ref(ref_name, new_target)
    updated = vfs.get_ref(ref_name)
    logger.info("moved %s to %s", ref_name, updated)

    return {
        'fingerprint': fingerprint,
        'blob_id': blob_id,
        'content': content,
        'head': head,
        'target': target,
        'updated_target': updated,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    derive = digest_identifier if args.digest_ids else length_identifier
    vfs = GitVfs(derive_identifier=derive)

    try:
        result = run_demo(
            vfs,
            args.data.encode("utf-8"),
            args.ref,
            args.new_target,
            args.algorithm,
        )
    except GitVfsError as e:
        logger.error("demo failed: %s", e)
        return 1

    print(f"{args.algorithm}: {result['fingerprint']}")
    print(f"blob_content: {result['content'].decode('utf-8', errors='replace')}")
    print(f"HEAD: {result['head']}")
    print(f"Main ref hash: {result['target']}")
    print(f"Updated Main ref hash: {result['updated_target']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
