"""Registry of special forms for the Yisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table with the evaluated head of a call before
looking for procedures or builtins. Every handler takes the whole call form,
the current environment and the evaluator to recurse with.
"""

from yisp.types.symbol import Symbol
from yisp.evaluation.special_forms.quote_forms import quote_form, lambda_form
from yisp.evaluation.special_forms.set_form import set_form
from yisp.evaluation.special_forms.define_form import define_form
from yisp.evaluation.special_forms.logic_forms import and_form, or_form
from yisp.evaluation.special_forms.if_form import if_form
from yisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("set"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
}
