"""
Shared fixtures: HTML documents shaped like the FFCV results pages.
"""

import pytest


STANDINGS_HTML = """
<html><body>
<table class="table">
  <tr><td colspan="11">Clasificación Primera Regional Grupo 3</td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td></td></tr>
  <tr>
    <td></td><td>Pos</td><td>Club</td><td>PJ</td><td>G</td><td>E</td><td>P</td>
    <td>GF</td><td>GC</td><td>DG</td><td>Pts</td>
  </tr>
  <tr>
    <td><img src="escudo1.png"></td><td>1</td><td><a href="#">UD Alboraya</a></td>
    <td>10<span class="pct">(100%)</span></td><td>8<span>(80%)</span></td><td>1</td><td>1</td>
    <td>25</td><td>7</td><td>18</td><td>25</td>
  </tr>
  <tr>
    <td><img src="escudo2.png"></td><td>2</td><td><a href="#">CD Meliana</a></td>
    <td>10</td><td>7</td><td>2</td><td>1</td>
    <td>20</td><td>9</td><td>11</td><td>23</td>
  </tr>
  <tr>
    <td></td><td>3</td><td>CF Foios</td>
    <td>10</td><td></td><td>n/d</td><td>3</td>
    <td>12</td><td>15</td><td>-3 (dif)</td><td>18</td>
  </tr>
  <tr>
    <td></td><td>-</td><td>Retirado</td>
    <td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td>
  </tr>
  <tr>
    <td></td><td>4</td><td>   </td>
    <td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td><td>0</td>
  </tr>
  <tr>
    <td></td><td>5</td><td>Club</td>
    <td>10</td><td>5</td><td>0</td><td>5</td><td>10</td><td>10</td><td>0</td><td>15</td>
  </tr>
  <tr>
    <td colspan="2"></td><td>6</td><td>CD Fantasma</td>
    <td>10</td><td>4</td><td>0</td><td>6</td><td>8</td><td>12</td><td>-4</td><td>12</td>
  </tr>
  <tr><td>Leyenda</td><td>Ascenso</td></tr>
</table>
</body></html>
"""

ROUND_HTML = """
<html><body>
<table>
  <tr><td colspan="8">Jornada 7</td></tr>
  <tr>
    <td>CD Meliana</td><td></td><td>43</td><td></td><td>UD Alboraya</td>
    <td>Campo Municipal de Meliana</td><td></td><td>Historial</td>
  </tr>
  <tr>
    <td>CF Foios</td><td></td><td>09:30</td><td></td><td>Racing Valencia</td>
    <td>Polideportivo Foios</td><td></td><td>Historial</td>
  </tr>
  <tr>
    <td>Vilamarxant CF</td><td></td><td></td><td></td><td>CD Museros</td>
    <td></td><td></td><td>Historial</td>
  </tr>
  <tr>
    <td>Atlético Vallbonense</td><td></td><td>2 - 2</td><td></td><td>CF Puçol</td>
    <td>El Clot</td><td></td><td>Historial</td>
  </tr>
  <tr>
    <td>-</td><td></td><td></td><td></td><td>-</td><td></td><td></td><td></td>
  </tr>
  <tr><td>Descansa</td><td>CD Benifairó</td></tr>
</table>
</body></html>
"""

CALENDAR_HTML = """
<html><body>
<table>
  <tr>
    <td>0</td><td></td><td>Equipo Perdido - Otro Equipo</td><td>1 - 0</td>
    <td>01-09-2025 10:00</td><td>Campo X</td>
  </tr>
  <tr><td>Jornada 5</td></tr>
  <tr><th>Nº</th><th>Escudo</th><th>Partido</th><th>Resultado</th><th>Fecha</th><th>Campo</th></tr>
  <tr>
    <td>1</td><td><img src="e.png"></td><td>CD Meliana - UD Alboraya</td><td>3 - 1</td>
    <td>12-10-2025 10:00</td><td>Campo Municipal de Meliana</td>
  </tr>
  <tr>
    <td>2</td><td></td><td>CF Foios - Racing Valencia</td><td>-</td>
    <td>12-10-2025</td><td>Polideportivo Foios</td>
  </tr>
  <tr>
    <td>3</td><td></td><td>Sin separador</td><td></td><td></td><td></td>
  </tr>
  <tr><td>jornada 6</td></tr>
  <tr>
    <td>4</td><td></td><td>UD Alboraya - CD Meliana</td><td></td>
    <td></td><td>  Ciudad Deportiva  </td>
  </tr>
  <tr><td>Jornada 7</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def standings_html():
    return STANDINGS_HTML


@pytest.fixture
def round_html():
    return ROUND_HTML


@pytest.fixture
def calendar_html():
    return CALENDAR_HTML


@pytest.fixture
def documents():
    """Raw documents keyed by source kind."""
    return {
        "standings": STANDINGS_HTML,
        "round": ROUND_HTML,
        "calendar": CALENDAR_HTML,
    }
