# clean_api/shared/utils/success_responses.py

_auth_example = {
    "user": {
        "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
        "name": "Jane",
        "email": "jane@example.com",
        "status": "active",
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z"
    },
    "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "access_token_expires_at": "2025-01-01T00:15:00Z",
    "refresh_token_expires_at": "2025-01-08T00:00:00Z",
    "csrf_token": "Jw0mM2v9b0mB2a4ZbU6yvQkq8mJt0n0a3yH6fX0cL1s"
}

# Authentication successes
signup_success = {
    201: {
        "description": "User created, session cookies set",
        "content": {"application/json": {"example": _auth_example}}
    }
}

auth_success = {
    200: {
        "description": "Session issued, cookies set",
        "content": {"application/json": {"example": _auth_example}}
    }
}

logout_success = {
    200: {
        "description": "Session revoked, cookies cleared",
        "content": {"application/json": {"example": {"success": True}}}
    }
}

delete_success = {
    200: {
        "description": "Resource deleted",
        "content": {"application/json": {"example": {"success": True}}}
    }
}
