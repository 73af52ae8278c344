from .lookup_address import LOOKUP_ADDRESS_TOOL, handle_lookup_address
