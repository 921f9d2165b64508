"""
Endpoint de normalização de valores

Chamado pelo script da página a cada evento `input` de um campo monetário:
recebe o texto atual (e o texto anterior) e devolve o texto normalizado.
"""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .money import normalize


@require_GET
def normalize_money(request):
    """
    GET /money/normalize/?value=<texto>&previous=<texto anterior>

    Returns:
        {"display": "R$ 1.234,56", "amount": "1234.56"}
        amount é null quando o campo foi apagado
    """
    raw = request.GET.get('value', '')
    previous = request.GET.get('previous')

    previous_state = normalize(previous) if previous is not None else None
    if previous_state is not None and previous_state.display != previous:
        # texto anterior fora do formato: não serve como "sem edição"
        previous_state = None

    state = normalize(raw, previous_state)
    return JsonResponse({
        'display': state.display,
        'amount': None if state.is_unset else str(state.amount),
    })
