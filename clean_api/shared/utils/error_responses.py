# clean_api/shared/utils/error_responses.py

# Generic error responses
common_errors = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "Internal server error.",
                    "code": "INTERNAL_SERVER_ERROR",
                }
            }
        }
    }
}

# Authentication and session errors
auth_errors = {
    401: {
        "description": "Unauthorized (invalid credentials, token or CSRF)",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_credentials": {
                        "summary": "Invalid Credentials",
                        "value": {"success": False, "error": "Invalid credentials", "code": "INVALID_CREDENTIALS"}
                    },
                    "invalid_refresh_token": {
                        "summary": "Invalid Refresh Token",
                        "value": {"success": False, "error": "Invalid refresh token", "code": "UNAUTHORIZED"}
                    },
                    "revoked_refresh_token": {
                        "summary": "Revoked Refresh Token",
                        "value": {"success": False, "error": "Refresh token has been revoked", "code": "UNAUTHORIZED"}
                    },
                    "invalid_csrf_token": {
                        "summary": "Invalid CSRF Token",
                        "value": {"success": False, "error": "Invalid CSRF token", "code": "UNAUTHORIZED"}
                    }
                }
            }
        }
    },
    409: {
        "description": "Conflict (email already in use)",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "Email is already registered",
                    "code": "RESOURCE_ALREADY_EXISTS",
                }
            }
        }
    },
    **common_errors
}

# Errors for bearer-protected endpoints
bearer_errors = {
    401: {
        "description": "Missing or invalid access token",
        "content": {
            "application/json": {
                "example": {"success": False, "error": "Invalid access token", "code": "UNAUTHORIZED"}
            }
        }
    },
    404: {
        "description": "User not found",
        "content": {
            "application/json": {
                "example": {"success": False, "error": "User not found.", "code": "RESOURCE_NOT_FOUND"}
            }
        }
    },
    **common_errors
}

_unauthorized = bearer_errors[401]

# User errors
user_errors = {
    401: _unauthorized,
    403: {
        "description": "Target is another user's account",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "You can only update your own account.",
                    "code": "PERMISSION_DENIED",
                }
            }
        }
    },
    404: bearer_errors[404],
    409: auth_errors[409],
    **common_errors
}

# Post errors
post_errors = {
    401: _unauthorized,
    404: {
        "description": "Post not found",
        "content": {
            "application/json": {
                "example": {"success": False, "error": "Post not found", "code": "RESOURCE_NOT_FOUND"}
            }
        }
    },
    **common_errors
}
