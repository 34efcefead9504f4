#
#
#

# Paths below are relative to {server}/api

# user
LOGIN = '/user/login'
LOGOUT = '/user/logout'
SESSION_GET = '/user/session/get'
PROFILE_GET = '/user/profile/get'
PROFILE_SET = '/user/profile/set'
CHANGE_PASSWORD = '/user/changePassword'
CREATE_TOKEN = '/user/createToken'
TWO_FACTOR_INIT = '/user/2fa/init'
TWO_FACTOR_ENABLE = '/user/2fa/enable'
TWO_FACTOR_DISABLE = '/user/2fa/disable'

# dashboard
DASHBOARD_STATS = '/dashboard/stats/get'
DASHBOARD_TOP_STATS = '/dashboard/stats/getTop'

# zones
ZONES_LIST = '/zones/list'
ZONES_CREATE = '/zones/create'
ZONES_DELETE = '/zones/delete'
ZONES_ENABLE = '/zones/enable'
ZONES_DISABLE = '/zones/disable'
ZONES_CLONE = '/zones/clone'
ZONES_CONVERT = '/zones/convert'
ZONES_OPTIONS_GET = '/zones/options/get'
ZONES_OPTIONS_SET = '/zones/options/set'
ZONES_EXPORT = '/zones/export'
ZONES_IMPORT = '/zones/import'
ZONES_RESYNC = '/zones/resync'
ZONES_PERMISSIONS_GET = '/zones/permissions/get'
ZONES_PERMISSIONS_SET = '/zones/permissions/set'

# dnssec
DNSSEC_SIGN = '/zones/dnssec/sign'
DNSSEC_UNSIGN = '/zones/dnssec/unsign'
DNSSEC_PROPERTIES_GET = '/zones/dnssec/properties/get'

# records
RECORDS_GET = '/zones/records/get'
RECORDS_ADD = '/zones/records/add'
RECORDS_UPDATE = '/zones/records/update'
RECORDS_DELETE = '/zones/records/delete'

# blocking
BLOCKED_LIST = '/blocked/list'
BLOCKED_ADD = '/blocked/add'
BLOCKED_DELETE = '/blocked/delete'
BLOCKED_IS_BLOCKED = '/blocked/isBlocked'
ALLOWED_LIST = '/allowed/list'
ALLOWED_ADD = '/allowed/add'
ALLOWED_DELETE = '/allowed/delete'

# cache
CACHE_LIST = '/cache/list'
CACHE_DELETE = '/cache/delete'
CACHE_FLUSH = '/cache/flush'
CACHE_PREFETCH = '/cache/prefetch'

# logs
LOGS_QUERY = '/logs/query'
LOGS_LIST = '/logs/list'
LOGS_DELETE = '/logs/delete'
LOGS_DELETE_ALL = '/logs/deleteAll'

# dhcp
DHCP_SCOPES_LIST = '/dhcp/scopes/list'
DHCP_SCOPES_GET = '/dhcp/scopes/get'
DHCP_SCOPES_SET = '/dhcp/scopes/set'
DHCP_SCOPES_DELETE = '/dhcp/scopes/delete'
DHCP_SCOPES_ENABLE = '/dhcp/scopes/enable'
DHCP_SCOPES_DISABLE = '/dhcp/scopes/disable'
DHCP_LEASES_LIST = '/dhcp/leases/list'
DHCP_LEASES_REMOVE = '/dhcp/leases/remove'

# apps
APPS_LIST = '/apps/list'
APPS_LIST_STORE = '/apps/listStoreApps'
APPS_DOWNLOAD = '/apps/downloadAndInstall'
APPS_UPDATE = '/apps/downloadAndUpdate'
APPS_UNINSTALL = '/apps/uninstall'
APPS_CONFIG_GET = '/apps/config/get'
APPS_CONFIG_SET = '/apps/config/set'

# settings
SETTINGS_GET = '/settings/get'
SETTINGS_SET = '/settings/set'
SETTINGS_FORCE_UPDATE_BLOCK_LISTS = '/settings/forceUpdateBlockLists'
SETTINGS_TEMPORARY_DISABLE_BLOCKING = '/settings/temporaryDisableBlocking'
SETTINGS_BACKUP = '/settings/backup'
SETTINGS_RESTORE = '/settings/restore'
SETTINGS_CHECK_FOR_UPDATE = '/settings/checkForUpdate'

# admin
USERS_LIST = '/admin/users/list'
USERS_CREATE = '/admin/users/create'
USERS_DELETE = '/admin/users/delete'
USERS_GET = '/admin/users/get'
USERS_SET = '/admin/users/set'
USERS_ENABLE = '/admin/users/enable'
USERS_DISABLE = '/admin/users/disable'
USERS_SET_PASSWORD = '/admin/users/setPassword'
GROUPS_LIST = '/admin/groups/list'
GROUPS_CREATE = '/admin/groups/create'
GROUPS_DELETE = '/admin/groups/delete'
GROUPS_GET = '/admin/groups/get'
GROUPS_SET = '/admin/groups/set'
SESSIONS_LIST = '/admin/sessions/list'
SESSIONS_DELETE = '/admin/sessions/delete'

# cluster
CLUSTER_STATE = '/admin/cluster/state'
CLUSTER_INIT = '/admin/cluster/init'
CLUSTER_JOIN = '/admin/cluster/initJoin'
CLUSTER_DELETE = '/admin/cluster/primary/delete'
CLUSTER_REMOVE_SECONDARY = '/admin/cluster/primary/removeSecondary'
CLUSTER_DELETE_SECONDARY = '/admin/cluster/primary/deleteSecondary'
CLUSTER_LEAVE = '/admin/cluster/secondary/leave'
CLUSTER_PROMOTE = '/admin/cluster/secondary/promote'
CLUSTER_RESYNC = '/admin/cluster/secondary/resync'

# dns client
DNS_CLIENT_RESOLVE = '/dnsClient/resolve'
DNS_CLIENT_FLUSH_CACHE = '/dnsClient/flushCache'
