"""Credit Desk - credit restoration CRM backend"""
