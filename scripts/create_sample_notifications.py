"""Insert a handful of sample notifications for every active user."""

from __future__ import annotations

import argparse

from crm_api.domain.entities import NotificationCategory
from crm_api.domain.exceptions import StorageError, ValidationError
from crm_api.infrastructure.database import SessionLocal, initialize_database
from crm_api.infrastructure.repositories import NotificationRepository, UserRepository

SAMPLE_NOTIFICATIONS = (
    (
        "Bienvenido al CRM",
        "Gracias por usar nuestro sistema. Aquí podrás gestionar tus leads y clientes.",
        NotificationCategory.INFO,
    ),
    (
        "Nuevo lead asignado",
        "Se te ha asignado un nuevo lead: María González de Empresa ABC.",
        NotificationCategory.SUCCESS,
    ),
    (
        "Recordatorio",
        "Tienes una reunión programada para hoy a las 15:00 con Juan Pérez.",
        NotificationCategory.WARNING,
    ),
    (
        "Meta alcanzada",
        "¡Felicidades! Has alcanzado tu meta de ventas del mes.",
        NotificationCategory.SUCCESS,
    ),
    (
        "Tarea pendiente",
        "Tienes 3 tareas pendientes por completar antes del fin de semana.",
        NotificationCategory.INFO,
    ),
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--per-user",
        type=int,
        default=len(SAMPLE_NOTIFICATIONS),
        choices=range(1, len(SAMPLE_NOTIFICATIONS) + 1),
        help="Cantidad de notificaciones por usuario",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        user_ids = UserRepository(session).list_active_ids()
        if not user_ids:
            print("No hay usuarios activos en la base de datos")
            return

        repository = NotificationRepository(session)
        created = 0
        for user_id in user_ids:
            for index, (title, message, category) in enumerate(
                SAMPLE_NOTIFICATIONS[: args.per_user]
            ):
                notification = repository.create(
                    recipient_id=user_id,
                    title=title,
                    message=message,
                    category=category,
                )
                # Every other sample starts out read.
                if index % 2:
                    repository.mark_as_read(user_id, notification.id)
                created += 1
    except (StorageError, ValidationError) as exc:
        raise SystemExit(f"No se pudieron crear las notificaciones: {exc}") from exc
    finally:
        session.close()

    print(f"{created} notificaciones creadas para {len(user_ids)} usuario(s)")


if __name__ == "__main__":
    main()
