# This file marks the routers package for API route modules.
# Route groups are registered by `workshop_api.api.app.create_app`.
