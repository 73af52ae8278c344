from .http_client_manager import HTTPClientManager, get_http_client_manager
from .cep_service import clean_cep, is_valid_cep, validate_cep, fetch_address_by_cep, format_address
