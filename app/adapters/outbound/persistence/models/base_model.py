# app/adapters/outbound/persistence/models/base_model.py

from app.adapters.outbound.persistence.database import Base

__all__ = ["Base"]
