"""
PolyMind CTF - Polymarket 条件代币标识符推导
ancillary data -> QuestionId -> ConditionId -> CollectionId -> PositionId
"""
from .ancillary import create_ancillary_data
from .ctf.collection import compute_collection_id, decompress_collection_id, is_on_curve_x
from .ctf.constants import DEFAULT_OUTCOME_SLOT_COUNT, UMA_ORACLE, USDC_ADDRESS, outcome_slot_count
from .ctf.derive import (
    BinaryPositions,
    calculate_position_id,
    calculate_position_ids,
    calculate_question_id,
    derive_binary_positions,
    get_condition_id,
    get_condition_id_with_defaults,
)
from .errors import (
    AncillaryError,
    CTFError,
    EmptyOutcomeError,
    InvalidHexError,
    InvalidOutcomeCountError,
    InvalidOutcomeIndexError,
    PointSearchError,
)

__all__ = [
    'create_ancillary_data',
    'calculate_question_id',
    'get_condition_id',
    'get_condition_id_with_defaults',
    'compute_collection_id',
    'decompress_collection_id',
    'is_on_curve_x',
    'calculate_position_id',
    'calculate_position_ids',
    'derive_binary_positions',
    'BinaryPositions',
    'UMA_ORACLE',
    'USDC_ADDRESS',
    'DEFAULT_OUTCOME_SLOT_COUNT',
    'outcome_slot_count',
    'CTFError',
    'AncillaryError',
    'InvalidOutcomeCountError',
    'EmptyOutcomeError',
    'InvalidOutcomeIndexError',
    'InvalidHexError',
    'PointSearchError',
]
