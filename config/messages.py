"""화면에 노출되는 문구 (es)"""

PAGE_TITLE = "📚 Gestión de Estudiantes"
LOADING = "⏳ Cargando estudiantes..."

HEADING_NEW = "➕ Nuevo Estudiante"
HEADING_EDIT = "✏️ Editar Estudiante"
SUBMIT_CREATE = "Crear Estudiante"
SUBMIT_UPDATE = "Actualizar Estudiante"
CANCEL = "Cancelar"
RELOAD = "🔄 Recargar"

LABEL_NAME = "Nombre"
LABEL_PHONE = "Teléfono"
LABEL_ADDRESS = "Dirección"
LABEL_NOTE = "Observaciones"

LIST_HEADING = "📋 Lista de Estudiantes"
LIST_EMPTY = "No hay estudiantes registrados"
TABLE_HEADERS = ["ID", LABEL_NAME, LABEL_PHONE, LABEL_ADDRESS, LABEL_NOTE, "Acciones"]
ACTION_EDIT = "✏️Editar"
ACTION_DELETE = "🗑️Eliminar"

CONFIRM_DELETE = "¿Estás seguro de eliminar este estudiante?"

# 에러 문구: 로드 실패는 고정 문구, 나머지는 prefix + 원인 메시지
ERROR_LOAD = "Error al cargar estudiantes"
ERROR_CREATE = "Error al crear estudiante: "
ERROR_UPDATE = "Error al actualizar estudiante: "
ERROR_DELETE = "Error al eliminar estudiante: "
