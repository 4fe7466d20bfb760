"""HTTP routers for the movies API."""
