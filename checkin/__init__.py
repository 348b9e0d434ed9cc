"""Health check-in tool webhook for the Vapi voice platform."""
