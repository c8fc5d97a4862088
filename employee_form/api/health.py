from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # No backing services to ping; the process answering is the check
    return {"status": "ok"}
