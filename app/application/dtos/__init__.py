# app/application/dtos/__init__.py
