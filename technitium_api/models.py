#
#
#

"""Typed payloads of the API endpoints.

Field names follow Python conventions; the camelCase (or, for the DNS
client, PascalCase) wire names are aliases. Required fields are required:
a payload missing one fails decoding rather than being filled with a
default. Server-owned free-form data (record rData) stays a JsonValue.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

from .json_value import JsonObject


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- user ---------------------------------------------------------------


class ServerInfo(ApiModel):
    version: str
    uptimestamp: Optional[str] = None
    dns_server_domain: Optional[str] = None
    dnssec_validation: Optional[bool] = None
    default_record_ttl: Optional[int] = None
    use_soa_serial_date_scheme: Optional[bool] = None
    cluster_initialized: Optional[bool] = None


class LoginResponse(ApiModel):
    token: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    info: Optional[ServerInfo] = None


class SessionInfo(ApiModel):
    username: str
    display_name: Optional[str] = None
    info: Optional[ServerInfo] = None


class Session(ApiModel):
    username: str
    is_current_session: bool
    partial_token: str
    type: str
    token_name: Optional[str] = None
    last_seen: str
    last_seen_remote_address: str
    last_seen_user_agent: Optional[str] = None


class SessionsResponse(ApiModel):
    sessions: List[Session]


class ProfileResponse(ApiModel):
    username: str
    display_name: Optional[str] = None
    session_timeout_seconds: Optional[int] = None
    member_of_groups: Optional[List[str]] = None
    sessions: Optional[List[Session]] = None


class TokenResponse(ApiModel):
    token: str
    username: str
    token_name: str


class TwoFactorInitResponse(ApiModel):
    qr_code: str
    issuer: str
    secret_key: str


# --- dashboard ----------------------------------------------------------


class StatsType(str, Enum):
    LAST_HOUR = 'LastHour'
    LAST_DAY = 'LastDay'
    LAST_WEEK = 'LastWeek'
    LAST_MONTH = 'LastMonth'
    LAST_YEAR = 'LastYear'
    CUSTOM = 'Custom'


class TopStatsType(str, Enum):
    TOP_CLIENTS = 'TopClients'
    TOP_DOMAINS = 'TopDomains'
    TOP_BLOCKED_DOMAINS = 'TopBlockedDomains'


class DashboardStats(ApiModel):
    total_queries: int
    total_no_error: int
    total_server_failure: int
    total_nx_domain: int
    total_refused: int
    total_authoritative: int
    total_recursive: int
    total_cached: int
    total_blocked: int
    total_dropped: int
    total_clients: int
    zones: int
    cached_entries: int
    allowed_zones: int
    blocked_zones: int
    allow_list_zones: int
    block_list_zones: int


class ChartDataset(ApiModel):
    label: Optional[str] = None
    data: List[float]
    # one colour for line charts, one per slice for pie charts
    background_color: Union[str, List[str]] = ''
    border_color: Optional[str] = None
    border_width: Optional[int] = None
    fill: Optional[bool] = None


class ChartData(ApiModel):
    labels: List[str]
    label_format: Optional[str] = None
    datasets: List[ChartDataset]


class TopStat(ApiModel):
    name: str
    hits: int
    domain: Optional[str] = None
    rate_limited: Optional[bool] = None


class StatsResponse(ApiModel):
    stats: DashboardStats
    main_chart_data: Optional[ChartData] = None
    query_response_chart_data: Optional[ChartData] = None
    query_type_chart_data: Optional[ChartData] = None
    protocol_type_chart_data: Optional[ChartData] = None
    top_clients: Optional[List[TopStat]] = None
    top_domains: Optional[List[TopStat]] = None
    top_blocked_domains: Optional[List[TopStat]] = None


class TopStatsResponse(ApiModel):
    top_clients: Optional[List[TopStat]] = None
    top_domains: Optional[List[TopStat]] = None
    top_blocked_domains: Optional[List[TopStat]] = None


# --- zones --------------------------------------------------------------


class ZoneType(str, Enum):
    PRIMARY = 'Primary'
    SECONDARY = 'Secondary'
    STUB = 'Stub'
    FORWARDER = 'Forwarder'
    SECONDARY_FORWARDER = 'SecondaryForwarder'
    CATALOG = 'Catalog'
    SECONDARY_CATALOG = 'SecondaryCatalog'


class Zone(ApiModel):
    name: str
    type: ZoneType
    internal: Optional[bool] = None
    dnssec_status: Optional[str] = None
    soa_serial: Optional[int] = None
    expiry: Optional[str] = None
    is_expired: Optional[bool] = None
    last_modified: Optional[str] = None
    disabled: Optional[bool] = None
    catalog: Optional[str] = None
    sync_failed: Optional[bool] = None
    notify_failed: Optional[bool] = None
    notify_failed_for: Optional[List[str]] = None
    validation_failed: Optional[bool] = None

    @property
    def is_disabled(self) -> bool:
        return bool(self.disabled)

    @property
    def is_internal(self) -> bool:
        return bool(self.internal)


class ZonesResponse(ApiModel):
    zones: List[Zone]


class ZoneOptions(ApiModel):
    name: str
    type: ZoneType
    internal: bool
    dnssec_status: str
    disabled: bool
    catalog: Optional[str] = None
    override_catalog_query_access: Optional[bool] = None
    override_catalog_zone_transfer: Optional[bool] = None
    override_catalog_notify: Optional[bool] = None
    query_access: Optional[str] = None
    query_access_network_acl: Optional[List[str]] = Field(
        default=None, alias='queryAccessNetworkACL'
    )
    zone_transfer: Optional[str] = None
    zone_transfer_network_acl: Optional[List[str]] = Field(
        default=None, alias='zoneTransferNetworkACL'
    )
    zone_transfer_tsig_key_names: Optional[List[str]] = None
    notify: Optional[str] = None
    notify_name_servers: Optional[List[str]] = None
    notify_secondary_catalog: Optional[bool] = None
    update: Optional[str] = None
    update_network_acl: Optional[List[str]] = Field(
        default=None, alias='updateNetworkACL'
    )
    primary_name_server_addresses: Optional[List[str]] = None
    primary_zone_transfer_protocol: Optional[str] = None
    primary_zone_transfer_tsig_key_name: Optional[str] = None
    validate_zone: Optional[bool] = None


class ZonePermissionsResponse(ApiModel):
    user_permissions: Optional[str] = None
    group_permissions: Optional[str] = None


class DnssecProperties(ApiModel):
    dnssec_status: str
    algorithm: Optional[str] = None
    dns_key_ttl: Optional[int] = None
    zsk_rollover_days: Optional[int] = None
    nx_proof: Optional[str] = None
    iterations: Optional[int] = None
    salt_length: Optional[int] = None


# --- records ------------------------------------------------------------


class RecordType(str, Enum):
    A = 'A'
    AAAA = 'AAAA'
    ANAME = 'ANAME'
    CAA = 'CAA'
    CNAME = 'CNAME'
    DNAME = 'DNAME'
    DS = 'DS'
    FWD = 'FWD'
    HTTPS = 'HTTPS'
    MX = 'MX'
    NAPTR = 'NAPTR'
    NS = 'NS'
    PTR = 'PTR'
    SOA = 'SOA'
    SRV = 'SRV'
    SSHFP = 'SSHFP'
    SVCB = 'SVCB'
    TLSA = 'TLSA'
    TXT = 'TXT'
    URI = 'URI'
    APP = 'APP'


class DnsRecord(ApiModel):
    name: str
    # str, signed zones also list DNSKEY, RRSIG, NSEC...
    type: str
    ttl: int
    disabled: bool
    r_data: JsonObject
    dnssec_status: Optional[str] = None
    last_used_on: Optional[str] = None

    @property
    def r_data_string(self) -> str:
        return ','.join(f'{k}={v}' for k, v in self.r_data.items())


class RecordsResponse(ApiModel):
    records: List[DnsRecord]


# --- blocking -----------------------------------------------------------


class DomainEntry(ApiModel):
    domain: str


class DomainsResponse(ApiModel):
    domains: List[DomainEntry]

    @property
    def domain_names(self) -> List[str]:
        return [d.domain for d in self.domains]


class BlockedCheckResponse(ApiModel):
    is_blocked: bool
    blocked_by: Optional[str] = None
    block_list_url: Optional[str] = None


# --- cache --------------------------------------------------------------


class CacheRecord(ApiModel):
    name: str
    type: str
    ttl: int
    r_data: Optional[JsonObject] = None


class CacheEntry(ApiModel):
    zone: str
    records: Optional[List[CacheRecord]] = None


class CacheResponse(ApiModel):
    zones: List[CacheEntry]


# --- logs ---------------------------------------------------------------


class LogEntry(ApiModel):
    row_number: int
    timestamp: str
    client_ip_address: str
    protocol: str
    response_type: str
    rcode: str
    qname: str
    qtype: str
    qclass: str
    answer: Optional[str] = None


class LogsResponse(ApiModel):
    page_number: int
    total_pages: int
    total_entries: int
    entries: List[LogEntry]


class LogFile(ApiModel):
    file_name: str
    size: int


class LogFilesResponse(ApiModel):
    log_files: List[LogFile]


# --- dhcp ---------------------------------------------------------------


class DhcpScope(ApiModel):
    name: str
    enabled: bool
    starting_address: str
    ending_address: str
    subnet_mask: str
    lease_time_days: Optional[int] = None
    lease_time_hours: Optional[int] = None
    lease_time_minutes: Optional[int] = None
    offer_delay_time: Optional[int] = None
    ping_check_enabled: Optional[bool] = None
    ping_check_timeout: Optional[int] = None
    ping_check_retries: Optional[int] = None
    domain_name: Optional[str] = None
    domain_search_list: Optional[List[str]] = None
    dns_updates: Optional[bool] = None
    dns_ttl: Optional[int] = None
    use_this_dns_server: Optional[bool] = None
    router_address: Optional[str] = None
    dns_servers: Optional[List[str]] = None
    wins_servers: Optional[List[str]] = None
    ntp_servers: Optional[List[str]] = None
    ntp_server_domain_names: Optional[List[str]] = None
    server_address: Optional[str] = None
    server_host_name: Optional[str] = None
    boot_file_name: Optional[str] = None
    allow_only_reserved_leases: Optional[bool] = None
    block_locally_administered_mac_addresses: Optional[bool] = None
    ignore_client_identifier_option: Optional[bool] = None


class DhcpScopesResponse(ApiModel):
    scopes: List[DhcpScope]


class DhcpLease(ApiModel):
    scope: str
    type: str
    hardware_address: str
    client_identifier: Optional[str] = None
    address: str
    host_name: Optional[str] = None
    lease_obtained: str
    lease_expires: str


class DhcpLeasesResponse(ApiModel):
    leases: List[DhcpLease]


# --- apps ---------------------------------------------------------------


class DnsAppProcessor(ApiModel):
    class_path: str
    description: str
    is_app_record_request_handler: Optional[bool] = None
    is_request_controller: Optional[bool] = None
    is_authoritative_request_handler: Optional[bool] = None
    is_request_blocking_handler: Optional[bool] = None
    is_query_logger: Optional[bool] = None
    is_post_processor: Optional[bool] = None


class DnsApp(ApiModel):
    name: str
    description: str
    version: str
    update_version: Optional[str] = None
    update_url: Optional[str] = None
    dns_apps: Optional[List[DnsAppProcessor]] = None


class AppsResponse(ApiModel):
    apps: List[DnsApp]


class AppStoreEntry(ApiModel):
    name: str
    description: str
    version: str
    url: str
    size: str
    last_modified: Optional[str] = None


class AppStoreResponse(ApiModel):
    store_apps: List[AppStoreEntry]


class AppConfigResponse(ApiModel):
    # app configs are free-form text, usually JSON, sometimes not
    config: Optional[str] = None


# --- settings -----------------------------------------------------------


class TsigKey(ApiModel):
    key_name: str
    shared_secret: str
    algorithm_name: str


class DnsSettings(ApiModel):
    # the server sends far more than is modelled here; keep the rest
    model_config = ConfigDict(extra='allow')

    version: str
    dns_server_domain: str
    default_record_ttl: int
    uptimestamp: Optional[str] = None
    cluster_initialized: Optional[bool] = None
    dns_server_local_end_points: Optional[List[str]] = None
    default_ns_record_ttl: Optional[int] = None
    default_soa_record_ttl: Optional[int] = None
    use_soa_serial_date_scheme: Optional[bool] = None
    prefer_ipv6: Optional[bool] = Field(default=None, alias='preferIPv6')
    udp_payload_size: Optional[int] = None
    dnssec_validation: Optional[bool] = None
    e_dns_client_subnet: Optional[bool] = None
    qname_minimization: Optional[bool] = None
    ns_revalidation: Optional[bool] = None
    resolver_retries: Optional[int] = None
    resolver_timeout: Optional[int] = None
    save_cache: Optional[bool] = None
    serve_stale: Optional[bool] = None
    cache_maximum_entries: Optional[int] = None
    cache_minimum_record_ttl: Optional[int] = None
    cache_maximum_record_ttl: Optional[int] = None
    enable_blocking: Optional[bool] = None
    allow_txt_blocking_report: Optional[bool] = None
    blocking_type: Optional[str] = None
    blocking_answer_ttl: Optional[int] = None
    block_list_urls: Optional[List[str]] = None
    block_list_update_interval_hours: Optional[int] = None
    block_list_next_updated_on: Optional[str] = None
    forwarders: Optional[List[str]] = None
    forwarder_protocol: Optional[str] = None
    concurrent_forwarding: Optional[bool] = None
    enable_logging: Optional[bool] = None
    logging_type: Optional[str] = None
    log_queries: Optional[bool] = None
    use_local_time: Optional[bool] = None
    log_folder: Optional[str] = None
    max_log_file_days: Optional[int] = None
    enable_in_memory_stats: Optional[bool] = None
    max_stat_file_days: Optional[int] = None
    recursion: Optional[str] = None
    web_service_http_port: Optional[int] = None
    web_service_enable_tls: Optional[bool] = None
    web_service_tls_port: Optional[int] = None
    enable_dns_over_http: Optional[bool] = None
    enable_dns_over_tls: Optional[bool] = None
    enable_dns_over_https: Optional[bool] = None
    enable_dns_over_quic: Optional[bool] = None
    dns_over_http_port: Optional[int] = None
    dns_over_tls_port: Optional[int] = None
    dns_over_https_port: Optional[int] = None
    dns_over_quic_port: Optional[int] = None
    tsig_keys: Optional[List[TsigKey]] = None


class UpdateCheckResponse(ApiModel):
    update_available: bool
    update_version: Optional[str] = None
    current_version: Optional[str] = None


# --- admin --------------------------------------------------------------


class User(ApiModel):
    username: str
    display_name: Optional[str] = None
    disabled: bool
    previous_session_logged_on: Optional[str] = None
    previous_session_remote_address: Optional[str] = None
    recent_session_logged_on: Optional[str] = None
    recent_session_remote_address: Optional[str] = None
    session_timeout_seconds: Optional[int] = None
    member_of_groups: Optional[List[str]] = None


class UsersResponse(ApiModel):
    users: List[User]


class UserGroup(ApiModel):
    name: str
    description: str
    members: Optional[List[str]] = None


class GroupsResponse(ApiModel):
    groups: List[UserGroup]


class PermissionSection(ApiModel):
    can_view: bool
    can_modify: bool
    can_delete: bool


class ZonePermissionSection(PermissionSection):
    can_create: bool


class GroupPermissions(ApiModel):
    dashboard: Optional[PermissionSection] = None
    zones: Optional[ZonePermissionSection] = None
    cache: Optional[PermissionSection] = None
    allowed: Optional[PermissionSection] = None
    blocked: Optional[PermissionSection] = None
    apps: Optional[PermissionSection] = None
    dhcp: Optional[PermissionSection] = None
    administration: Optional[PermissionSection] = None
    settings: Optional[PermissionSection] = None
    logs: Optional[PermissionSection] = None


class GroupDetails(ApiModel):
    name: str
    description: str
    members: Optional[List[str]] = None
    permissions: Optional[GroupPermissions] = None


# --- cluster ------------------------------------------------------------


class ClusterNode(ApiModel):
    id: int
    name: str
    url: str
    ip_addresses: Optional[List[str]] = None
    type: str
    state: str
    up_since: Optional[str] = None
    last_seen: Optional[str] = None
    config_last_synced: Optional[str] = None


class ClusterStateResponse(ApiModel):
    cluster_initialized: Optional[bool] = None
    cluster_domain: Optional[str] = None
    cluster_nodes: Optional[List[ClusterNode]] = None


# --- dns client ---------------------------------------------------------


class _PascalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class DnsMetadata(_PascalModel):
    name_server: Optional[str] = None
    protocol: Optional[str] = None
    datagram_size: Optional[int] = None
    round_trip_time: Optional[str] = None


class DnsQuestion(_PascalModel):
    name: str
    type: str
    class_: str = Field(alias='Class')


class DnsAnswer(_PascalModel):
    name: str
    type: str
    class_: str = Field(alias='Class')
    ttl: int = Field(alias='TTL')
    r_data: Optional[JsonObject] = None
    dnssec_status: Optional[str] = None


class DnsResolveResponse(_PascalModel):
    metadata: Optional[DnsMetadata] = None
    identifier: Optional[int] = None
    is_response: Optional[bool] = None
    opcode: Optional[str] = Field(default=None, alias='OPCODE')
    authoritative_answer: Optional[bool] = None
    truncation: Optional[bool] = None
    recursion_desired: Optional[bool] = None
    recursion_available: Optional[bool] = None
    authentic_data: Optional[bool] = None
    checking_disabled: Optional[bool] = None
    rcode: Optional[str] = Field(default=None, alias='RCODE')
    qdcount: Optional[int] = Field(default=None, alias='QDCOUNT')
    ancount: Optional[int] = Field(default=None, alias='ANCOUNT')
    nscount: Optional[int] = Field(default=None, alias='NSCOUNT')
    arcount: Optional[int] = Field(default=None, alias='ARCOUNT')
    question: List[DnsQuestion] = Field(default_factory=list)
    answer: List[DnsAnswer] = Field(default_factory=list)
    authority: List[DnsAnswer] = Field(default_factory=list)
    additional: List[DnsAnswer] = Field(default_factory=list)
