# API Route Constants

# Base API
API_BASE = '/api'

# Venue routes
VENUE_BASE = f'{API_BASE}/venues'
VENUE_GET = f'{VENUE_BASE}/{{venue_id}}'

# Event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_TICKET_TYPES = f'{EVENT_GET}/ticket-types'
EVENT_TICKET_TYPE_GET = f'{EVENT_TICKET_TYPES}/{{ticket_type_id}}'
EVENT_TICKETS = f'{EVENT_GET}/tickets'

# Ticket routes
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_RESERVATIONS = f'{TICKET_GET}/reservations'
TICKET_RESERVATION_GET = f'{TICKET_RESERVATIONS}/{{user_id}}'
TICKET_PURCHASE = f'{TICKET_GET}/purchase'
