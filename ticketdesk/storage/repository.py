from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import tempfile
import threading
from typing import Any, List

from pydantic import ValidationError

from .models import Ticket

logger = logging.getLogger(__name__)

# umask del proceso, leída una vez al importar (os.umask solo se puede leer cambiándola)
_UMASK = os.umask(0)
os.umask(_UMASK)


class TicketStoreError(RuntimeError):
    """El archivo de tickets no se pudo leer o escribir, o su contenido es inválido."""


class TicketRepository:
    """Colección de tickets persistida en un único archivo JSON (un array).

    Cada alta relee el archivo completo, agrega el ticket al final y lo reescribe
    entero. La escritura va a un temporal en el mismo directorio y luego se
    renombra encima del original, así un lector nunca ve un array a medio escribir.
    Pensado para volúmenes pequeños.
    """

    def __init__(self, file: Path):
        self.file = Path(file)
        self.dir = self.file.parent
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Crear el directorio y un array vacío si no existe el archivo.

        Se puede llamar en cada arranque: nunca pisa un archivo existente.
        """
        with self._lock:
            try:
                self.dir.mkdir(parents=True, exist_ok=True)
                if not self.file.exists():
                    self._save([])
                    logger.info(f"Created empty ticket store at {self.file}")
            except OSError as e:
                logger.exception(f"Could not initialize ticket store at {self.file}")
                raise TicketStoreError(f"Cannot initialize {self.file}") from e

    def _load(self) -> List[Any]:
        if not self.file.exists():
            return []
        try:
            data = json.loads(self.file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.exception(f"Error reading tickets from {self.file}")
            raise TicketStoreError(f"Cannot read {self.file}") from e
        if not isinstance(data, list):
            logger.error(f"Ticket store {self.file} does not contain a JSON array")
            raise TicketStoreError(f"Malformed ticket store {self.file}")
        return data

    def _file_mode(self) -> int:
        # mkstemp crea con 0600: conservar el modo actual o seguir la umask
        try:
            return self.file.stat().st_mode & 0o777
        except FileNotFoundError:
            return 0o666 & ~_UMASK

    def _fsync_dir(self) -> None:
        if os.name != "posix":
            return
        dir_fd = os.open(self.dir, os.O_RDONLY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)

    def _save(self, data: List[Any]) -> None:
        payload = json.dumps(data, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=self.dir, prefix=f".{self.file.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.file)
        except BaseException:
            # no dejar temporales huérfanos
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
        # el rename solo es durable tras sincronizar el directorio
        self._fsync_dir()

    def _parse(self, data: List[Any]) -> List[Ticket]:
        try:
            return [Ticket.model_validate(item) for item in data]
        except ValidationError as e:
            logger.exception(f"Malformed ticket record in {self.file}")
            raise TicketStoreError(f"Malformed ticket store {self.file}") from e

    def create(self, title: str, description: str) -> Ticket:
        if not title or not description:
            raise ValueError("title and description must be non-empty")
        with self._lock:
            data = self._load()
            # validar lo existente antes de reescribirlo
            self._parse(data)
            ticket = Ticket.new(title, description)
            data.append(ticket.to_json())
            try:
                self.dir.mkdir(parents=True, exist_ok=True)
                self._save(data)
            except OSError as e:
                logger.exception(f"Error writing tickets to {self.file}")
                raise TicketStoreError(f"Cannot write {self.file}") from e
        logger.info(f"Ticket created id={ticket.id} total={len(data)}")
        return ticket

    def list_all(self) -> List[Ticket]:
        return self._parse(self._load())
