"""
Route modules, included by api.main in resolution order.
"""
