class ResponseMessages:
    """Standard API response messages"""

    SUCCESS = "Success"
    CREATED = "Created successfully"
    RSVP_CREATED = "¡Confirmación enviada exitosamente!"
    RSVPS_RETRIEVED = "Confirmaciones obtenidas"

    # User-facing error messages
    STORE_UNAVAILABLE = "No se pudo conectar a la base de datos."
    MISSING_REQUIRED_FIELD = "Por favor completa todos los campos obligatorios"
    MISSING_CONTACT_INFO = (
        "Por favor debes proporcionar un teléfono de contacto y cédula "
        "si confirmas tu asistencia."
    )
    INVALID_PHONE_FORMAT = "Por favor ingresa un número de teléfono válido."
    INVALID_IDENTITY_FORMAT = "Por favor ingresa una cédula válida (8 dígitos)."
    DUPLICATE_IDENTITY = "Ya existe una confirmación con esta cédula."
    FETCH_ERROR = "Error al cargar las confirmaciones"
    WRITE_ERROR = "Error al enviar la confirmación. Inténtalo nuevamente."
    UNEXPECTED_ERROR = "An unexpected error occurred"


class AppConstants:
    # Table
    DEFAULT_RSVP_TABLE = "confirmaciones"

    # Validation
    PHONE_PATTERN = r"^\+?\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}$"
    IDENTITY_PATTERN = r"^[0-9]{1,8}$"

    # Store backends
    BACKEND_SUPABASE = "supabase"
    BACKEND_SQL = "sql"
