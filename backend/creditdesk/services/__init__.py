"""Credit Desk - Services"""
