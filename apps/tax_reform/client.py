"""
Cliente HTTP do serviço de cálculo da reforma tributária

O serviço recebe os campos numéricos do formulário e devolve
{"status": "ok", "data": {...}}. Toda falha vira TaxReformAPIError.
"""
import json
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)


class TaxReformAPIError(Exception):
    """Falha ao obter o resultado da simulação"""


class TaxReformNotConfigured(TaxReformAPIError):
    """TAX_REFORM_API_URL não configurada"""


def _encode(value):
    # Decimal só existe do nosso lado; no fio é número JSON
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


class TaxReformClient:
    """
    Cliente síncrono (httpx)

    Args:
        base_url: endpoint de cálculo (POST)
        timeout: segundos
        transport: transporte httpx alternativo (testes)
    """

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 10,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or ''
        self.timeout = timeout
        self.transport = transport

    def simulate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Envia os dados e devolve o `data` da resposta

        Raises:
            TaxReformNotConfigured: sem URL configurada
            TaxReformAPIError: erro de rede, HTTP, corpo inválido ou status != ok
        """
        if not self.base_url:
            raise TaxReformNotConfigured("TAX_REFORM_API_URL não configurada")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as http:
                resp = http.post(self.base_url, json=_encode(payload))
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Serviço de cálculo respondeu %s", exc.response.status_code
            )
            raise TaxReformAPIError(
                f"Resposta HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Falha de comunicação com o serviço de cálculo: %s", exc)
            raise TaxReformAPIError(str(exc)) from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Resposta do serviço de cálculo não é JSON: %s", exc)
            raise TaxReformAPIError("Resposta inválida") from exc

        if not isinstance(body, dict) or body.get('status') != 'ok':
            status = body.get('status') if isinstance(body, dict) else None
            logger.warning("Serviço de cálculo devolveu status=%r", status)
            raise TaxReformAPIError(f"Status inesperado: {status!r}")

        data = body.get('data')
        if not isinstance(data, dict):
            raise TaxReformAPIError("Resposta sem 'data'")

        return data


def get_tax_reform_client() -> TaxReformClient:
    """Cliente montado a partir das settings"""
    return TaxReformClient(
        base_url=getattr(settings, 'TAX_REFORM_API_URL', ''),
        timeout=getattr(settings, 'TAX_REFORM_API_TIMEOUT', 10),
    )
