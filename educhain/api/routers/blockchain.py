"""
Simulated ledger endpoints.

Receipts and addresses are random; see ``educhain.services.ledger_sim``.
Each write-style call still lands in the audit log.
"""

import time

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_ledger, get_user_id
from educhain.schemas.blockchain import (
    ContractDeployment,
    IssueTranscriptRequest,
    LedgerReceipt,
    LedgerStatus,
    LedgerVerification,
    RegisterStudentRequest,
    VerifyTranscriptRequest,
)
from educhain.services.audit_trail import get_audit_service
from educhain.services.ledger_sim import (
    ACADEMIC_VERIFICATION_CONTRACT,
    NETWORK,
    SimulatedLedger,
)

router = APIRouter(prefix="/api/blockchain", tags=["blockchain"])


@router.post("/register-student", response_model=LedgerReceipt)
async def register_student(
    body: RegisterStudentRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
    ledger: SimulatedLedger = Depends(get_ledger),
):
    receipt = ledger.register_student(body.student_address)
    await get_audit_service().record(
        db,
        "blockchain_register_student",
        f"Student registered on blockchain: {body.student_address}",
        user_id=user_id,
        metadata=LedgerReceipt(**receipt).model_dump(by_alias=True),
    )
    return receipt


@router.post("/issue-transcript", response_model=LedgerReceipt)
async def issue_transcript(
    body: IssueTranscriptRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
    ledger: SimulatedLedger = Depends(get_ledger),
):
    receipt = ledger.issue_transcript(body.student_address)
    await get_audit_service().record(
        db,
        "blockchain_issue_transcript",
        f"Transcript issued on blockchain for: {body.student_address}",
        user_id=user_id,
        metadata=LedgerReceipt(**receipt).model_dump(by_alias=True),
    )
    return receipt


@router.get("/status", response_model=LedgerStatus)
async def ledger_status(ledger: SimulatedLedger = Depends(get_ledger)):
    return {
        "network": ledger.network_status(),
        "performance": ledger.metrics_summary(),
        "contracts": {
            "academic_verification": ACADEMIC_VERIFICATION_CONTRACT,
            "status": "deployed",
        },
    }


@router.post("/verify-transcript", response_model=LedgerVerification)
async def verify_transcript_on_ledger(
    body: VerifyTranscriptRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
    ledger: SimulatedLedger = Depends(get_ledger),
):
    proof = ledger.create_transcript_proof({
        "transcriptId": body.transcript_id,
        "studentId": body.student_id,
        "transcriptHash": body.transcript_hash,
        "timestamp": int(time.time() * 1000),
    })
    verified = ledger.verify_credential(body.student_id, body.transcript_hash)
    await get_audit_service().record(
        db,
        "transcript_verified",
        f"Transcript verification for student {body.student_id}",
        user_id=user_id,
        metadata={
            "transcriptId": body.transcript_id,
            "proof": proof["proof"],
            "merkleRoot": proof["merkle_root"],
            "isValid": verified,
        },
    )
    return {
        "verified": verified,
        "proof": proof["proof"],
        "merkle_root": proof["merkle_root"],
        "transaction_hash": ledger.transaction_hash(),
    }


@router.post("/deploy-contract", response_model=ContractDeployment)
async def deploy_contract(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
    ledger: SimulatedLedger = Depends(get_ledger),
):
    address = ledger.deploy_contract()
    await get_audit_service().record(
        db,
        "contract_deployed",
        "New academic verification contract deployed",
        user_id=user_id,
        metadata={"contractAddress": address},
    )
    return {"contract_address": address, "network": NETWORK, "status": "deployed"}
