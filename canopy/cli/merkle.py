"""
CLI commands for Merkle tree operations.

Provides commands for:
- Computing the Merkle root of a leaves file
- Generating an inclusion proof for a leaf
- Verifying an inclusion proof against a root

Leaves files hold one hex-encoded leaf per line (0x prefix optional,
blank lines ignored).
"""

import sys
from pathlib import Path
from typing import List, Optional

import click

from canopy.cli.context import CLIContext, handle_canopy_error, pass_context, validate_hex
from canopy.logging_config import get_logger
from canopy.merkle import MerkleTree, dedup_leaves, from_hex, verify as verify_proof

logger = get_logger(__name__)


def read_leaves(path: Path) -> List[bytes]:
    """
    Read hex-encoded leaves from a file, one per line.

    Raises:
        click.BadParameter: If the file is not text or a line is not valid hex
    """
    try:
        content = path.read_text()
    except UnicodeDecodeError as e:
        raise click.BadParameter(
            f"'{path}' is not a text file: {e}",
            param_hint="LEAVES_FILE",
        )

    leaves = []
    for line_number, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            leaves.append(from_hex(line))
        except ValueError:
            raise click.BadParameter(
                f"line {line_number} is not a hex string: '{line}'",
                param_hint="LEAVES_FILE",
            )
    return leaves


def _build_tree(ctx: CLIContext, leaves_file: Path, dedup: Optional[bool]) -> MerkleTree:
    leaves = read_leaves(leaves_file)

    if dedup is None:
        dedup = ctx.get_config().tree.dedup_leaves
    if dedup:
        before = len(leaves)
        leaves = dedup_leaves(leaves)
        logger.debug(f"Removed {before - len(leaves)} consecutive duplicate leaves")

    return MerkleTree(leaves, hasher=ctx.get_hasher())


leaves_file_argument = click.argument(
    "leaves_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)

dedup_option = click.option(
    "--dedup/--no-dedup",
    default=None,
    help="Drop consecutive duplicate leaves before building (default: from configuration)",
)


@click.command("root")
@leaves_file_argument
@dedup_option
@pass_context
@handle_canopy_error
def root(ctx: CLIContext, leaves_file: Path, dedup: Optional[bool]):
    """
    Print the Merkle root of LEAVES_FILE as lowercase hex.

    Examples:

        canopy root leaves.txt
    """
    tree = _build_tree(ctx, leaves_file, dedup)
    click.echo(tree.get_hex_root())


@click.command("proof")
@leaves_file_argument
@click.argument("leaf", callback=validate_hex)
@dedup_option
@pass_context
@handle_canopy_error
def proof(ctx: CLIContext, leaves_file: Path, leaf: bytes, dedup: Optional[bool]):
    """
    Print the inclusion proof for LEAF, one 0x-prefixed entry per line.

    An entry of bare "0x" is the empty sentinel (no sibling at that level).

    Examples:

        canopy proof leaves.txt 0x02
    """
    tree = _build_tree(ctx, leaves_file, dedup)
    for entry in tree.get_hex_proof(leaf):
        click.echo(entry)


@click.command("verify")
@click.option("--root", "-r", "root_hash", required=True, callback=validate_hex,
              help="Expected Merkle root (hex)")
@click.option("--leaf", "-f", required=True, callback=validate_hex,
              help="Leaf to verify (hex)")
@click.option("--proof", "-p", "proof_entries", multiple=True, callback=validate_hex,
              help="Proof entry (hex), repeat in bottom-up order; pass 0x for a sentinel")
@pass_context
@handle_canopy_error
def verify(ctx: CLIContext, root_hash: bytes, leaf: bytes, proof_entries: tuple):
    """
    Verify an inclusion proof against a Merkle root.

    Exits with status 0 when the proof is valid and 1 otherwise.

    Examples:

        canopy verify -r 9f2c... -f 0x02 -p 0x01 -p 0x5a1e...
    """
    if verify_proof(list(proof_entries), leaf, root_hash, hasher=ctx.get_hasher()):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)
