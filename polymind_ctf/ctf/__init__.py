"""
CTF 标识符推导核心
"""
from .collection import compute_collection_id, encode_collection_hash
from .derive import BinaryPositions, derive_binary_positions

__all__ = ['compute_collection_id', 'encode_collection_hash', 'BinaryPositions', 'derive_binary_positions']
