"""Registry of special forms for the conslisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names can never be shadowed by a binding in the operator position.
Each handler receives the form's operand list unevaluated.
"""

from types import MappingProxyType

from conslisp.types.symbol import Symbol
from conslisp.evaluation.special_forms.begin_form import begin_form
from conslisp.evaluation.special_forms.quote_form import quote_form
from conslisp.evaluation.special_forms.lambda_form import lambda_form
from conslisp.evaluation.special_forms.define_form import define_form
from conslisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = MappingProxyType({
    Symbol("begin"): begin_form,
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
})
