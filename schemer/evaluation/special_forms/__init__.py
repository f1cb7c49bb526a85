"""Registry of special forms for the schemer evaluator.

Maps dispatcher Actions to handler functions that implement non-standard
evaluation rules. Every handler is called as
handler(tail, env, context, evaluate_fn, is_tail_call).
"""

from schemer.evaluation.dispatch import Action
from schemer.evaluation.special_forms.begin_form import begin_form
from schemer.evaluation.special_forms.cond_form import cond_form
from schemer.evaluation.special_forms.define_form import define_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.logic_forms import and_form, or_form, not_form
from schemer.evaluation.special_forms.quit_form import quit_form
from schemer.evaluation.special_forms.quote_form import quote_form
from schemer.evaluation.special_forms.require_form import require_form

SPECIAL_FORMS = {
    Action.QUOTE: quote_form,
    Action.LAMBDA: lambda_form,
    Action.COND: cond_form,
    Action.DEFINE: define_form,
    Action.AND: and_form,
    Action.OR: or_form,
    Action.NOT: not_form,
    Action.BEGIN: begin_form,
    Action.REQUIRE: require_form,
    Action.QUIT: quit_form,
}
