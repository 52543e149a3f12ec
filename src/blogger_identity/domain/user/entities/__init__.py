from blogger_identity.domain.user.entities.linked_account import LinkedAccount

__all__ = ["LinkedAccount"]
