"""
Views da simulação da reforma tributária
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from .client import TaxReformAPIError, get_tax_reform_client
from .forms import TaxReformDetailedForm, TaxReformForm
from .formatting import ACTIVITY_LABELS, COSTS_LABELS, SEGMENT_LABELS, get_label
from .results import parse_result

logger = logging.getLogger(__name__)

RESULT_SESSION_KEY = 'tax_reform_result'

SUBMIT_ERROR_MESSAGE = 'Não foi possível enviar os dados. Tente novamente.'


# =============================================================================
# Helpers
# =============================================================================

def _submit(request, form):
    """
    Envia o formulário validado ao serviço de cálculo

    Returns:
        True se o resultado foi guardado na sessão
    """
    payload = form.to_payload()
    client = get_tax_reform_client()

    try:
        data = client.simulate(payload)
        parse_result(data)
    except TaxReformAPIError as exc:
        logger.error(f"Falha na simulação ({form.__class__.__name__}): {exc}")
        return False
    except ValueError as exc:
        logger.error(f"Resultado da simulação em formato inválido: {exc}")
        return False

    request.session[RESULT_SESSION_KEY] = data
    logger.info(
        f"Simulação concluída: form={form.__class__.__name__}, "
        f"segment={payload.get('segment')}"
    )
    return True


def _simulation_view(request, form_class, template_name):
    """GET: formulário vazio / POST: valida, envia e redireciona para o resultado"""
    if request.method == 'POST':
        form = form_class(request.POST)
        if form.is_valid():
            if _submit(request, form):
                return redirect('tax_reform:results')
            messages.error(request, SUBMIT_ERROR_MESSAGE)
    else:
        form = form_class()

    return render(request, template_name, {'form': form})


def _load_result(request):
    """Resultado guardado na sessão; descarta o que não puder ser lido"""
    data = request.session.get(RESULT_SESSION_KEY)
    if data is None:
        return None

    try:
        return parse_result(data)
    except ValueError:
        logger.warning("Resultado guardado na sessão é inválido; descartando")
        del request.session[RESULT_SESSION_KEY]
        return None


# =============================================================================
# Views
# =============================================================================

def simulation(request):
    """
    Simulação rápida

    Campos: segmento, faturamento, estrutura de custos, regime
    """
    return _simulation_view(request, TaxReformForm, 'tax_reform/simulation.html')


def detailed_simulation(request):
    """
    Simulação detalhada

    Alíquota e base de cálculo de cada imposto, antes (PIS/PASEP, COFINS,
    IPI, ICMS, ISS) e depois da reforma (CBS, IBS)
    """
    return _simulation_view(request, TaxReformDetailedForm, 'tax_reform/detailed_simulation.html')


def results(request):
    """
    Resultado da última simulação

    Sem resultado na sessão: página "Nenhum resultado encontrado"
    """
    result = _load_result(request)
    if result is None:
        return render(request, 'tax_reform/no_result.html')

    context = {'result': result}

    if not result.is_detailed:
        inputs = result.inputs
        context['input_labels'] = {
            'segment': get_label(SEGMENT_LABELS, _code(inputs.get('segment'))),
            'costs': get_label(COSTS_LABELS, _code(inputs.get('costs'))),
            'activity': get_label(ACTIVITY_LABELS, _code(inputs.get('activity'))),
        }

    return render(request, 'tax_reform/results.html', context)


def _code(value):
    """Decimal inteiro vindo do JSON -> int (para buscar o rótulo)"""
    if value is not None and value == value.to_integral_value():
        return int(value)
    return value
