"""
Startup routines: schema provisioning and sample data.
"""
