"""Unit tests for the bcrypt password hasher."""

import bcrypt
import pytest
from pytest_mock import MockerFixture

from src.infrastructure.cryptography.bcrypt_adapter import BcryptAdapter, prehash


@pytest.mark.unit
class TestBcryptAdapterInit:
    """Construction-time validation of the cost factor."""

    @pytest.mark.parametrize("rounds", [4, 12, 31])
    def test_accepts_supported_rounds(self, rounds: int) -> None:
        """Rounds within bcrypt's range are stored."""
        assert BcryptAdapter(rounds).rounds == rounds

    @pytest.mark.parametrize("rounds", [0, 3, 32, -1])
    def test_rejects_out_of_range_rounds(self, rounds: int) -> None:
        """Rounds outside 4..31 raise ValueError."""
        with pytest.raises(ValueError, match="between 4 and 31"):
            BcryptAdapter(rounds)

    @pytest.mark.parametrize("rounds", ["12", 12.0, True, None])
    def test_rejects_non_integer_rounds(self, rounds: object) -> None:
        """Non-integer rounds raise TypeError."""
        with pytest.raises(TypeError, match="must be an integer"):
            BcryptAdapter(rounds)  # type: ignore[arg-type]


@pytest.mark.unit
class TestBcryptAdapterHash:
    """Hashing behaviour."""

    async def test_generates_salt_with_configured_rounds(
        self, mocker: MockerFixture
    ) -> None:
        """gensalt is called with the construction-time cost."""
        # Setup
        mock_gensalt = mocker.patch(
            "src.infrastructure.cryptography.bcrypt_adapter.bcrypt.gensalt",
            return_value=b"$2b$12$abcdefghijklmnopqrstuu",
        )
        mocker.patch(
            "src.infrastructure.cryptography.bcrypt_adapter.bcrypt.hashpw",
            return_value=b"hashed_value",
        )

        # Execute
        await BcryptAdapter(12).hash("any_value")

        # Assert
        mock_gensalt.assert_called_once_with(rounds=12)

    async def test_hashes_encoded_value_with_salt(self, mocker: MockerFixture) -> None:
        """hashpw receives the prehashed value and the generated salt."""
        # Setup
        salt = b"$2b$12$abcdefghijklmnopqrstuu"
        mocker.patch(
            "src.infrastructure.cryptography.bcrypt_adapter.bcrypt.gensalt",
            return_value=salt,
        )
        mock_hashpw = mocker.patch(
            "src.infrastructure.cryptography.bcrypt_adapter.bcrypt.hashpw",
            return_value=b"hashed_value",
        )

        # Execute
        result = await BcryptAdapter(12).hash("any_value")

        # Assert
        mock_hashpw.assert_called_once_with(prehash("any_value"), salt)
        assert result == "hashed_value"

    async def test_propagates_hashpw_failure(self, mocker: MockerFixture) -> None:
        """A bcrypt failure reaches the caller."""
        mocker.patch(
            "src.infrastructure.cryptography.bcrypt_adapter.bcrypt.hashpw",
            side_effect=ValueError("Invalid salt"),
        )

        with pytest.raises(ValueError, match="Invalid salt"):
            await BcryptAdapter(4).hash("any_value")

    async def test_real_hash_verifies(self) -> None:
        """A real hash at the minimum cost checks against the plaintext."""
        hashed = await BcryptAdapter(4).hash("valid_password")

        assert hashed.startswith("$2b$04$")
        assert bcrypt.checkpw(prehash("valid_password"), hashed.encode("utf-8"))
        assert not bcrypt.checkpw(prehash("other_password"), hashed.encode("utf-8"))

    async def test_same_value_hashes_differently(self) -> None:
        """Each call draws a fresh salt."""
        adapter = BcryptAdapter(4)

        assert await adapter.hash("value") != await adapter.hash("value")

    @pytest.mark.parametrize(
        "password",
        ["p" * 73, "é" * 40, "x" * 1000],
        ids=["73-ascii", "80-utf8-bytes", "1000-ascii"],
    )
    async def test_hashes_passwords_beyond_bcrypt_input_limit(
        self, password: str
    ) -> None:
        """Passwords longer than 72 UTF-8 bytes hash and verify."""
        hashed = await BcryptAdapter(4).hash(password)

        assert bcrypt.checkpw(prehash(password), hashed.encode("utf-8"))

    async def test_long_passwords_differing_after_72_bytes_are_distinct(
        self,
    ) -> None:
        """Every byte of a long password affects the hash."""
        hashed = await BcryptAdapter(4).hash("a" * 72 + "b")

        assert not bcrypt.checkpw(prehash("a" * 72 + "c"), hashed.encode("utf-8"))


@pytest.mark.unit
class TestPrehash:
    """Test cases for prehash."""

    @pytest.mark.parametrize("value", ["", "valid_password", "é" * 40, "x" * 1000])
    def test_output_fits_bcrypt_input(self, value: str) -> None:
        """The output is always 44 bytes with no NUL byte."""
        result = prehash(value)

        assert len(result) == 44
        assert b"\x00" not in result

    def test_is_deterministic(self) -> None:
        """The same value always yields the same bytes."""
        assert prehash("valid_password") == prehash("valid_password")
