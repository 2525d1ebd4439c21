"""Registry of special forms for the Zeus evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application.

Every handler has the signature (tail, env, evaluate_fn, is_tail_call).
"""

from zeus.types.symbol import Symbol
from zeus.evaluation.special_forms.progn_form import progn_form
from zeus.evaluation.special_forms.quote_form import quote_form
from zeus.evaluation.special_forms.lambda_form import lambda_form
from zeus.evaluation.special_forms.define_form import define_form, defun_form, set_form
from zeus.evaluation.special_forms.if_form import if_form
from zeus.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from zeus.evaluation.special_forms.conditional_forms import cond_form, case_form, when_form, unless_form
from zeus.evaluation.special_forms.logic_forms import and_form, or_form
from zeus.evaluation.special_forms.do_loop_form import do_loop_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("defun"): defun_form,
    Symbol("set!"): set_form,
    Symbol("if"): if_form,
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("letrec"): letrec_form,
    Symbol("cond"): cond_form,
    Symbol("case"): case_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("progn"): progn_form,
    Symbol("begin"): progn_form,
    Symbol("when"): when_form,
    Symbol("unless"): unless_form,
    Symbol("do"): do_loop_form,
}
