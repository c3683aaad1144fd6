"""Domain helpers shared by the API routers"""
