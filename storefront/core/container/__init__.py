"""Container module - centralized dependency injection.

Re-exports all factory functions from submodules:

    from storefront.core.container import get_cache, get_user_repository, ...

The container is organized into modules:
- infrastructure: Core services (cache, db, logging, security, email, storage)
- repositories: Repository factories
- auth_handlers: Authentication handler factories
- catalog_handlers: User administration, brand and product handler factories
"""

# Infrastructure services
from storefront.core.container.infrastructure import (
    get_authorization,
    get_cache,
    get_database,
    get_db_session,
    get_email_service,
    get_file_storage,
    get_logger,
    get_otp_store,
    get_password_service,
    get_token_signer,
)

# Repositories
from storefront.core.container.repositories import (
    get_brand_repository,
    get_product_repository,
    get_token_repository,
    get_user_repository,
)

# Auth handlers
from storefront.core.container.auth_handlers import (
    get_auth_token_service,
    get_confirm_otp_handler,
    get_forgot_password_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_tokens_handler,
    get_register_user_handler,
    get_reset_password_handler,
    get_send_otp_handler,
    get_send_verification_email_handler,
    get_token_lifetimes,
    get_verify_email_handler,
)

# User, brand and product handlers
from storefront.core.container.catalog_handlers import (
    get_create_brand_handler,
    get_create_product_handler,
    get_create_user_handler,
    get_delete_brand_handler,
    get_delete_product_handler,
    get_delete_user_handler,
    get_get_brand_handler,
    get_get_product_handler,
    get_get_user_handler,
    get_list_all_products_handler,
    get_list_brands_handler,
    get_list_products_handler,
    get_list_users_handler,
    get_update_brand_handler,
    get_update_product_handler,
    get_update_user_handler,
)

__all__ = [
    # Infrastructure
    "get_authorization",
    "get_cache",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_file_storage",
    "get_logger",
    "get_otp_store",
    "get_password_service",
    "get_token_signer",
    # Repositories
    "get_brand_repository",
    "get_product_repository",
    "get_token_repository",
    "get_user_repository",
    # Auth
    "get_auth_token_service",
    "get_confirm_otp_handler",
    "get_forgot_password_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_tokens_handler",
    "get_register_user_handler",
    "get_reset_password_handler",
    "get_send_otp_handler",
    "get_send_verification_email_handler",
    "get_token_lifetimes",
    "get_verify_email_handler",
    # Users, brands, products
    "get_create_brand_handler",
    "get_create_product_handler",
    "get_create_user_handler",
    "get_delete_brand_handler",
    "get_delete_product_handler",
    "get_delete_user_handler",
    "get_get_brand_handler",
    "get_get_product_handler",
    "get_get_user_handler",
    "get_list_all_products_handler",
    "get_list_brands_handler",
    "get_list_products_handler",
    "get_list_users_handler",
    "get_update_brand_handler",
    "get_update_product_handler",
    "get_update_user_handler",
]
