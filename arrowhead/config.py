"""Settings shared by providers and consumers of an Arrowhead local cloud."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ArrowheadConfig:
    """Settings that must agree with the Arrowhead core systems."""

    # service settings
    service_name: str = ""
    interface: str = ""
    service_uri: str = ""
    unit: str = ""
    security: str = ""

    # connection to the core
    access_uri: str = ""

    # orchestrator flags
    override_store: bool = False
    matchmaking: bool = False
    metadata_search: bool = False
    ping_providers: bool = False
    only_preferred: bool = False
    external_service_request: bool = False

    # this system
    this_system_name: str = ""
    this_address: str = ""
    this_port: int = 0

    # target system
    target_system_name: str = ""
    target_address: str = ""
    target_port: int = 0

    # security
    secure_arrowhead_interface: bool = False
    secure_provider_interface: bool = False
    public_key_path: str = ""
    private_key_path: str = ""
    authentication_info: str = ""