"""
metagen package.

Provides:
- A FastAPI relay that streams AI-generated HTML meta tags (metagen.main)
- A streaming client that renders the response as it arrives (metagen.client)
"""
