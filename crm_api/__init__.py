"""CRM Social Leads API package.

Leads, campaigns, social networks and user notifications exposed over HTTP,
with a websocket channel for realtime notification delivery.
"""
