"""Schemas for the simulated ledger endpoints."""

from typing import Optional

from pydantic import Field

from educhain.schemas.base import CamelModel


class RegisterStudentRequest(CamelModel):
    student_address: str = Field(min_length=1, max_length=255)
    hash: Optional[str] = None


class IssueTranscriptRequest(CamelModel):
    student_address: str = Field(min_length=1, max_length=255)
    transcript_hash: Optional[str] = None


class VerifyTranscriptRequest(CamelModel):
    transcript_id: str = Field(min_length=1)
    student_id: str = Field(min_length=1)
    transcript_hash: str = Field(min_length=1)


class LedgerReceipt(CamelModel):
    transaction_hash: str
    block_number: int
    gas_used: int
    status: str


class NetworkStatus(CamelModel):
    connected: bool
    block_number: int
    gas_price: str


class OperationTiming(CamelModel):
    avg: float
    count: int
    min: float
    max: float


class ContractInfo(CamelModel):
    academic_verification: str
    status: str


class LedgerStatus(CamelModel):
    network: NetworkStatus
    performance: dict[str, OperationTiming] = Field(default_factory=dict)
    contracts: ContractInfo


class LedgerVerification(CamelModel):
    verified: bool
    proof: str
    merkle_root: str
    transaction_hash: str


class ContractDeployment(CamelModel):
    contract_address: str
    network: str
    status: str
