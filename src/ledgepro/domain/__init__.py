"""Domain layer for ledgepro application.

Services are imported from their modules (``ledgepro.domain.store`` etc.);
this package does not re-export them so that the persistence mappers can
import ``ledgepro.domain.entities`` without pulling in the store.
"""
