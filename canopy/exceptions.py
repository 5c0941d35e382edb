"""
Exception hierarchy for Canopy.

All custom exceptions inherit from CanopyError base class.
"""


class CanopyError(Exception):
    """Base exception for all Canopy errors."""
    pass


# Merkle Tree Errors
class MerkleError(CanopyError):
    """Base exception for Merkle tree errors."""
    pass


class EmptyTreeError(MerkleError):
    """Raised when a Merkle tree is constructed from an empty leaf sequence."""
    pass


class LeafNotFoundError(MerkleError):
    """Raised when a proof is requested for a leaf that is not in the tree."""
    pass


class InvariantError(MerkleError):
    """Raised when an internal precondition is violated by the caller."""
    pass


# Configuration Errors
class ConfigurationError(CanopyError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class UnsupportedDigestError(ConfigurationError):
    """Raised when an unknown digest algorithm is requested."""
    pass
