"""appseed: scaffolder de proyectos con validaciones previas.

Flujo:
- valida el nombre (reglas npm + dependencias reservadas)
- comprueba que el directorio destino es seguro
- verifica si hay una versión más reciente de la herramienta
- escribe un `package.json` mínimo en la raíz del proyecto
"""

__version__ = "0.1.0"
