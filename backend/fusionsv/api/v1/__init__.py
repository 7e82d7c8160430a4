from fastapi import APIRouter
from fusionsv.api.v1 import structural_variants

router = APIRouter()
router.include_router(
    structural_variants.router, prefix="/structural-variants", tags=["structural-variants"]
)
