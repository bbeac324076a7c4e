from fastapi import Header, HTTPException

def get_tenant_id(x_tenant_id: str = Header(...)) -> str:
    if not x_tenant_id:
        raise HTTPException(status_code=400, detail="X-Tenant-ID header is missing")
    return x_tenant_id

def get_user_identifier(x_user_id: str = Header(...)) -> str:
    """Identity stamped as created_by on new journal entries."""
    if not x_user_id:
        raise HTTPException(status_code=400, detail="X-User-ID header is missing")
    return x_user_id
