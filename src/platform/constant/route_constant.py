# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_ME = f'{USER_BASE}/me'

# Event routes
EVENT_BASE = f'{API_BASE}/event'
EVENT_CREATE = EVENT_BASE
EVENT_LIST = EVENT_BASE
EVENT_ORGANIZER = f'{EVENT_BASE}/organizer'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'

# Transaction routes
TRANSACTION_BASE = f'{API_BASE}/transaction'
TRANSACTION_RESERVE = TRANSACTION_BASE
TRANSACTION_MY = f'{TRANSACTION_BASE}/my'
TRANSACTION_ORGANIZER = f'{TRANSACTION_BASE}/organizer'
TRANSACTION_UPLOAD = f'{TRANSACTION_BASE}/{{transaction_id}}/upload'
TRANSACTION_MANAGE = f'{TRANSACTION_BASE}/{{transaction_id}}/manage'
