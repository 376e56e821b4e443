"""Test that rendering honours templates found in RenderingConfig.templates_dirs."""

from cvpress.base import RenderingConfig
from cvpress.tools import mk_cv


def test_custom_template_dir(tmp_path):
    cv = {
        'name': 'Custom Template User',
        'email': 'ct@example.com',
        'template': 'mytpl',
    }

    tpl = tmp_path / 'mytpl.html'
    tpl.write_text(
        '<html><head><style>h1 { color: teal; }</style></head>'
        '<body><h1 id="name">{{name}}</h1>{{#if phone}}<p>{{phone}}</p>{{/if}}</body></html>'
    )

    cfg = RenderingConfig(format='html', templates_dirs=[str(tmp_path)])
    out = mk_cv(cv, cfg)
    assert b'<h1 id="name">Custom Template User</h1>' in out
    assert b'h1 { color: teal; }' in out
    assert b'<p>' not in out


def test_custom_dir_shadows_packaged_template(tmp_path):
    (tmp_path / 'classic.html').write_text('<body><p>mine: {{name}}</p></body>')
    cfg = RenderingConfig(templates_dirs=[str(tmp_path)])
    out = mk_cv({'name': 'Ada', 'template': 'classic'}, cfg)
    assert b'<p>mine: Ada</p>' in out
