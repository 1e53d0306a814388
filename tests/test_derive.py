"""
标识符推导流水线测试
"""
import pytest
import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from web3 import Web3

from polymind_ctf.ancillary import create_ancillary_data
from polymind_ctf.ctf.constants import UMA_ORACLE, USDC_ADDRESS, outcome_slot_count
from polymind_ctf.ctf.derive import (
    BinaryPositions,
    calculate_position_id,
    calculate_position_ids,
    calculate_question_id,
    compute_position_id_hash,
    derive_binary_positions,
    get_condition_id,
    get_condition_id_with_defaults,
    position_id_from_collection,
)
from polymind_ctf.ctf.hashing import to_address, to_hash
from polymind_ctf.errors import InvalidHexError, InvalidOutcomeIndexError

TITLE = "ETH greater than 10000?"
DESCRIPTION = (
    "Will the price of ETH on the ETH/USDC Uniswap V3 5bps pool be greater than "
    "10000 USDC by December 31st 2024?"
)
CREATOR = "0x6d8c4e9adf5748af82dabe2c6225207770d6b4fa"

EXPECTED_QUESTION_ID = "0x01741d802f72305df80da4d6e8ecd3a50287f09ec62edb3bd95ac7c395b2f5ef"
EXPECTED_CONDITION_ID = "0x491b47c68ed1de5b01c359fd5d14a285b68af60b14ec7939acfee2afbfbb8ec8"

CONDITION_ID = "0x41771a29f1fa3b5ac743ddcf224017f802bd69152c1a65230ec666abfc22b708"
COLLATERAL = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
EXPECTED_POSITION_0 = 87848146419241057657677458104196204655830537958664996373577118668208015365957
EXPECTED_POSITION_1 = 11831001752042525186810643219442170205387399550590230096735412415464402686073


@pytest.fixture
def ancillary():
    return create_ancillary_data(TITLE, DESCRIPTION, CREATOR, ["Yes", "No"])


class TestQuestionAndCondition:
    """QuestionId / ConditionId 测试"""

    def test_question_id(self, ancillary):
        question_id = calculate_question_id(ancillary)
        assert Web3.to_hex(question_id) == EXPECTED_QUESTION_ID

    def test_question_id_deterministic(self):
        first = calculate_question_id(create_ancillary_data(TITLE, DESCRIPTION, CREATOR, ["Yes", "No"]))
        second = calculate_question_id(create_ancillary_data(TITLE, DESCRIPTION, CREATOR, ["Yes", "No"]))
        assert first == second
        assert len(first) == 32

    def test_question_id_accepts_str(self, ancillary):
        assert calculate_question_id(ancillary.decode('utf-8')) == calculate_question_id(ancillary)

    def test_condition_id_with_defaults(self, ancillary):
        condition_id = get_condition_id_with_defaults(calculate_question_id(ancillary))
        assert Web3.to_hex(condition_id) == EXPECTED_CONDITION_ID

    def test_condition_id_explicit(self):
        explicit = get_condition_id(UMA_ORACLE, EXPECTED_QUESTION_ID, outcome_slot_count())
        assert Web3.to_hex(explicit) == EXPECTED_CONDITION_ID

    def test_condition_id_layout(self):
        """keccak256(oracle(20) || questionId(32) || slotCount(32))"""
        oracle = "0x" + "11" * 20
        question_id = "0x" + "22" * 32
        expected = Web3.keccak(
            bytes.fromhex("11" * 20) + bytes.fromhex("22" * 32) + (3).to_bytes(32, byteorder='big')
        )
        assert get_condition_id(oracle, question_id, 3) == bytes(expected)

    def test_slot_count_changes_condition(self):
        assert (
            get_condition_id(UMA_ORACLE, EXPECTED_QUESTION_ID, 2)
            != get_condition_id(UMA_ORACLE, EXPECTED_QUESTION_ID, 3)
        )

    def test_oracle_checksum_not_enforced(self):
        """地址大小写不影响结果"""
        lower = get_condition_id(UMA_ORACLE.lower(), EXPECTED_QUESTION_ID, 2)
        upper = get_condition_id("0x" + UMA_ORACLE[2:].upper(), EXPECTED_QUESTION_ID, 2)
        assert lower == upper

    def test_invalid_oracle(self):
        with pytest.raises(InvalidHexError) as exc_info:
            get_condition_id("0x1234", EXPECTED_QUESTION_ID, 2)
        assert exc_info.value.field == "oracle"
        assert exc_info.value.expected_length == 20

    def test_invalid_question_id(self):
        with pytest.raises(InvalidHexError):
            get_condition_id(UMA_ORACLE, "0x" + "zz" * 32, 2)


class TestPositionIds:
    """PositionId (TokenId) 测试"""

    def test_expected_values(self):
        assert calculate_position_id(COLLATERAL, CONDITION_ID, 0) == EXPECTED_POSITION_0
        assert calculate_position_id(COLLATERAL, CONDITION_ID, 1) == EXPECTED_POSITION_1

    def test_position_ids_pair(self):
        assert calculate_position_ids(COLLATERAL, CONDITION_ID) == (EXPECTED_POSITION_0, EXPECTED_POSITION_1)

    def test_checksummed_collateral(self):
        assert calculate_position_id(USDC_ADDRESS, CONDITION_ID, 0) == EXPECTED_POSITION_0

    def test_position_from_collection(self):
        collection_id = "0x63ecd1f555d88721e1d063640ec7719a904925b55bf9a8c3e9d1dddfa86b1a6b"
        assert position_id_from_collection(COLLATERAL, collection_id) == EXPECTED_POSITION_0
        position_hash = compute_position_id_hash(COLLATERAL, collection_id)
        assert int.from_bytes(position_hash, byteorder='big') == EXPECTED_POSITION_0

    def test_pipeline_produces_consistent_ids(self, ancillary):
        condition_id = get_condition_id_with_defaults(calculate_question_id(ancillary))
        yes_id, no_id = calculate_position_ids(COLLATERAL, condition_id)
        assert yes_id != no_id
        assert yes_id != 0
        assert no_id != 0
        assert yes_id < 1 << 256

    def test_invalid_outcome_index(self):
        with pytest.raises(InvalidOutcomeIndexError):
            calculate_position_id(COLLATERAL, CONDITION_ID, 2)

    def test_invalid_collateral(self):
        with pytest.raises(InvalidHexError):
            calculate_position_id(b"\x00" * 19, CONDITION_ID, 0)


class TestBinaryPositions:
    """二元头寸汇总测试"""

    def test_derive_binary_positions(self):
        positions = derive_binary_positions(COLLATERAL, CONDITION_ID)

        assert isinstance(positions, BinaryPositions)
        assert positions.collateral == COLLATERAL
        assert positions.condition_id == CONDITION_ID
        assert positions.collection_id_yes == "0x63ecd1f555d88721e1d063640ec7719a904925b55bf9a8c3e9d1dddfa86b1a6b"
        assert positions.collection_id_no == "0x610f95f837bfcb4a52eedebd551bbdd7f273edeb47ad140cfba8287e6fed1929"
        assert positions.position_yes == EXPECTED_POSITION_0
        assert positions.position_no == EXPECTED_POSITION_1
        print(f"✓ YES Token ID: {positions.position_yes_hex[:30]}...")
        print(f"✓ NO Token ID: {positions.position_no_hex[:30]}...")

    def test_hex_forms(self):
        positions = derive_binary_positions(COLLATERAL, CONDITION_ID)
        assert len(positions.position_yes_hex) == 66
        assert int(positions.position_yes_hex, 16) == EXPECTED_POSITION_0
        assert int(positions.position_no_hex, 16) == EXPECTED_POSITION_1

    def test_to_dict(self):
        data = derive_binary_positions(COLLATERAL, CONDITION_ID).to_dict()
        assert data["position_yes"] == str(EXPECTED_POSITION_0)
        assert data["position_no"] == str(EXPECTED_POSITION_1)
        assert data["position_no_hex"].startswith("0x")
        assert set(data) >= {"collateral", "condition_id", "collection_id_yes", "collection_id_no"}



class TestHexInput:
    """十六进制输入解析测试"""

    def test_uppercase_prefix(self):
        """0X 前缀与 0x 等价"""
        upper = "0X" + CONDITION_ID[2:].upper()
        assert to_hash(upper) == bytes.fromhex(CONDITION_ID[2:])
        assert to_address("0X" + COLLATERAL[2:].upper()) == bytes.fromhex(COLLATERAL[2:])

    def test_bare_hex(self):
        assert to_hash(CONDITION_ID[2:]) == bytes.fromhex(CONDITION_ID[2:])

    def test_uppercase_prefix_in_pipeline(self):
        upper = "0X" + CONDITION_ID[2:].upper()
        assert calculate_position_id(COLLATERAL, upper, 0) == EXPECTED_POSITION_0

    def test_double_prefix_rejected(self):
        with pytest.raises(InvalidHexError):
            to_hash("0x0x" + CONDITION_ID[4:])
