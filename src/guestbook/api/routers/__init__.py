"""HTTP routers: the home page and the message API."""
