_ACRONYMS = {
    "id": "ID",
    "ttl": "TTL",
    "http": "HTTP",
    "dns": "DNS",
}


def pascal_case(field_name: str) -> str:
    """
    Map a snake_case field to the catalog and scheduler APIs'
    PascalCase keys (``destination_service_id`` -> ``DestinationServiceID``).
    """
    return "".join(
        _ACRONYMS.get(part, part.capitalize())
        for part in field_name.split("_")
    )
