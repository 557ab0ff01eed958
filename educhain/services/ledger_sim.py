"""
Simulated ledger.

Stands in for an academic-credential smart contract. Receipts, block numbers,
gas figures and contract addresses are random; proofs are plain digests of
the submitted data. Nothing is persisted or sent anywhere.

One instance lives on ``app.state.ledger``; randomness comes from the
injected ``random.Random`` so tests can seed it.
"""

import hashlib
import json
import random
import time
from collections import defaultdict, deque
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

logger = structlog.get_logger(__name__)

ACADEMIC_VERIFICATION_CONTRACT = "0x742d35Cc6634C0532925a3b8d5C9D6A4B34C72e3"
NETWORK = "ethereum"

BLOCK_BASE = 18_000_000
BLOCK_SPAN = 1_000_000
STATUS_BLOCK_BASE = 15_000_000

# (floor, span) for gas used per operation
REGISTER_GAS = (21_000, 100_000)
ISSUE_GAS = (50_000, 150_000)

VERIFY_SUCCESS_RATE = 0.9

# Timing samples kept per operation; older ones fall off
TIMING_WINDOW = 1000


class SimulatedLedger:
    """In-process stand-in for the credential contract."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self._timings: dict[str, deque[float]] = defaultdict(
            lambda: deque(maxlen=TIMING_WINDOW)
        )

    # ── Helpers ────────────────────────────────────────────────────────

    def _hex(self, n_chars: int) -> str:
        return "".join(self.rng.choice("0123456789abcdef") for _ in range(n_chars))

    def _receipt(self, gas: tuple[int, int]) -> dict:
        floor, span = gas
        return {
            "transaction_hash": f"0x{self._hex(32)}",
            "block_number": self.rng.randrange(BLOCK_SPAN) + BLOCK_BASE,
            "gas_used": self.rng.randrange(span) + floor,
            "status": "success",
        }

    @contextmanager
    def _timed(self, operation: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self._timings[operation].append((time.perf_counter() - start) * 1000)

    # ── Operations ─────────────────────────────────────────────────────

    def register_student(self, student_address: str) -> dict:
        receipt = self._receipt(REGISTER_GAS)
        logger.info("ledger_student_registered", student_address=student_address)
        return receipt

    def issue_transcript(self, student_address: str) -> dict:
        receipt = self._receipt(ISSUE_GAS)
        logger.info("ledger_transcript_issued", student_address=student_address)
        return receipt

    def network_status(self) -> dict:
        return {
            "connected": True,
            "block_number": self.rng.randrange(BLOCK_SPAN) + STATUS_BLOCK_BASE,
            "gas_price": f"{self.rng.random() * 50 + 10:.2f} Gwei",
        }

    def deploy_contract(self) -> str:
        address = f"0x{self._hex(40)}"
        logger.info("ledger_contract_deployed", contract_address=address)
        return address

    def create_transcript_proof(self, data: dict[str, Any]) -> dict:
        """Digest-based stand-in for a transcript proof (single-leaf tree)."""
        with self._timed("transcript_proof_generation"):
            leaf = json.dumps(data, sort_keys=True, default=str)
            digest = hashlib.sha3_256(leaf.encode()).hexdigest()
            proof = hashlib.sha256(f"{digest}:transcript".encode()).hexdigest()
            merkle_root = hashlib.sha256(leaf.encode()).hexdigest()
        return {"hash": digest, "proof": proof, "merkle_root": merkle_root}

    def verify_credential(self, student_id: str, transcript_hash: str) -> bool:
        with self._timed("credential_verification"):
            verified = self.rng.random() < VERIFY_SUCCESS_RATE
        logger.info("ledger_credential_checked", student_id=student_id, verified=verified)
        return verified

    def transaction_hash(self) -> str:
        return f"0x{self._hex(64)}"

    def metrics_summary(self) -> dict[str, dict[str, float]]:
        """Per-operation timing stats in milliseconds over the last TIMING_WINDOW calls."""
        return {
            op: {
                "avg": sum(times) / len(times),
                "count": len(times),
                "min": min(times),
                "max": max(times),
            }
            for op, times in self._timings.items()
            if times
        }
