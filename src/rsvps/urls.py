RSVP_FORM_URL = "/"
ADMIN_DASHBOARD_URL = "/admin"
ADMIN_SUMMARY_API_URL = "/api/v1/rsvps"
