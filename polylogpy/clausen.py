#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Clausen functions

    Cl2(theta) = Im(Li2(exp(i theta)))
    Cl3(theta) = Re(Li3(exp(i theta)))

as economized Pade approximations on [0, pi/2) and [pi/2, pi], after reducing
theta to [0, pi] with parity and 2 pi periodicity. The long double Cl2 is
the CERNLIB DCLAUS (C326) scheme of K. S. Koelbig, J. Comput. Appl. Math. 64
(1995) 295, extended to long double precision.

Each function has one coefficient set per precision tier; the tier is picked
from the dtype of the argument (see polylogpy.precision).

"""

from collections import namedtuple
from functools import partial

import numpy as np

from .functions import elementwise
from .polynomial import estrin, horner
from .precision import tier_for

PadeTables = namedtuple('PadeTables', ['low_p', 'low_q', 'high_p', 'high_q',
                                       'evaluate'])


def _ld(*values):
    return tuple(np.longdouble(v) for v in values)


CL2 = {
    'double': PadeTables(
        low_p=(2.7951565822419270e-02, -8.8865360514541522e-04,
               6.8282348222485902e-06, -7.5276232403566808e-09),
        low_q=(1.0000000000000000e+00, -3.6904397961160525e-02,
               3.7342870576106476e-04, -8.7460760866531179e-07),
        high_p=(6.4005702446195512e-01, -2.0641655351338783e-01,
                2.4175305223497718e-02, -1.2355955287855728e-03,
                2.5649833551291124e-05, -1.4783829128773320e-07),
        high_q=(1.0000000000000000e+00, -2.5299102015666356e-01,
                2.2148751048467057e-02, -7.8183920462457496e-04,
                9.5432542196310670e-06, -1.8184302880448247e-08),
        evaluate=estrin),
    'extended': PadeTables(
        low_p=_ld('2.795156582241927046412081735910646612854e-02',
                  '-2.704528039782130831727668760352473119745e-03',
                  '1.058576547177802928762582430994046913011e-04',
                  '-2.147507975446829791077479076828450780219e-06',
                  '2.401415296681270093111305488326496124531e-08',
                  '-1.450571790543608936928129678333156785370e-10',
                  '4.280534901040925211965221454555516657749e-13',
                  '-4.792802237226483806823208684186867186935e-16',
                  '8.883657381852830471176782778999368430017e-20'),
        low_q=_ld('1',
                  '-1.018694323414614410071369720193716012304e-01',
                  '4.248408782245281612900840467370146443889e-03',
                  '-9.337710301347963985908084056584187570954e-05',
                  '1.159379163193822053103946363960603543601e-06',
                  '-8.083352720393357000801675734774176899515e-09',
                  '2.949313240431512997069808854213308209519e-11',
                  '-4.742700419624204182400715964695278593777e-14',
                  '2.158380636740175386190809152807629331877e-17'),
        high_p=_ld('6.400570244619551220929428522356830562481e-01',
                   '-4.651631624886004423703445967760673575997e-01',
                   '1.487130845262105644024901814213146749895e-01',
                   '-2.749665174801454303884783494225610407035e-02',
                   '3.251522465413666561950482170352156048203e-03',
                   '-2.567438381297475310848635518657180974512e-04',
                   '1.372076105130164861564020074178493529151e-05',
                   '-4.924179093673498700461153483531075799113e-07',
                   '1.153267936031337440182387313169828395860e-08',
                   '-1.667578310677508029208023423625588832295e-10',
                   '1.348437292247918547169070120217729056878e-12',
                   '-5.052245092698477071447850656280954693011e-15',
                   '5.600638109466570497480415519182233229048e-18'),
        high_q=_ld('1',
                   '-6.572465772185054284667746526549393897676e-01',
                   '1.886234634096976582977630140163583172173e-01',
                   '-3.103347567899737687117030083178445406132e-02',
                   '3.230860399291224478336071920154030050234e-03',
                   '-2.216546569335921728108984951507368387512e-04',
                   '1.011949972138985643994631167412420906088e-05',
                   '-3.033400935206767852937290458763547850384e-07',
                   '5.748454611964843057644023468691231929690e-09',
                   '-6.408350048413952604351408631173781906861e-11',
                   '3.678584366662951864267349037579031493395e-13',
                   '-8.240439699357036167611014086997683837396e-16',
                   '3.041049046123062158788159773779755292771e-19'),
        evaluate=horner),
}

CL3 = {
    'double': PadeTables(
        low_p=(-7.5430148591242361e-01, 1.6121940167854339e-02,
               -3.7484056212140535e-05, -2.5191292110169198e-07),
        low_q=(1.0000000000000000e+00, -2.6015033560727570e-02,
               1.5460630299236049e-04, -1.0987530650923219e-07),
        high_p=(-4.9017024647634973e-01, 4.1559155224660940e-01,
                -7.9425531417806701e-02, 5.9420152260602943e-03,
                -1.8302227163540190e-04, 1.8027408929418533e-06),
        high_q=(1.0000000000000000e+00, -1.9495887541644712e-01,
                1.2059410236484074e-02, -2.5235889467301620e-04,
                1.0199322763377861e-06, 1.9612106499469264e-09),
        evaluate=estrin),
    # TODO: add one more term (degree 9) to the low-theta fit
    'extended': PadeTables(
        low_p=_ld('-7.543014859124236086513359303676733979191e-01',
                  '6.402301836868117230156416581268033099875e-02',
                  '-2.127896098530218208963041584986434591351e-03',
                  '3.463165731182357705183279540808782152120e-05',
                  '-2.754862729116033380287404534774919686497e-07',
                  '8.052538909862304289974104174276673516832e-10',
                  '1.346114649676610056675054469405688579693e-12',
                  '-9.624573206929882592200009480606020302094e-15',
                  '8.275206821858140239162250779757575466957e-18'),
        low_q=_ld('1',
                  '-8.951892304715004068142060061380434166813e-02',
                  '3.220693717342225233144437822487371940443e-03',
                  '-5.958192714621426181787114562889325229941e-05',
                  '6.014846196895560469030445734629791881016e-07',
                  '-3.236076181461994705051496031602571907271e-09',
                  '8.340438662048507021623726184074556662658e-12',
                  '-7.892956808623089379250167198187183753861e-15',
                  '1.129224149808716947279552120998699589829e-18'),
        high_p=_ld('-4.901702464763497295023867883920487195585e-01',
                   '1.383627100551763417738051599449773818178e+00',
                   '-1.844002682148364621305380083013461847933e+00',
                   '1.563880808732850065996446127297492925273e+00',
                   '-9.527454451278452672142805742734474223237e-01',
                   '4.444304509117015442253289733308961077770e-01',
                   '-1.647875030685306314220378800538115071507e-01',
                   '4.967825071601030726970818647842992410835e-02',
                   '-1.233860796084952133261104412894436518532e-02',
                   '2.541279038266908987516674931803683131910e-03',
                   '-4.345955367166196341753615932772484893528e-04',
                   '6.151865219319515057283373610462827653393e-05',
                   '-7.156818018509654192384040775515653410043e-06',
                   '6.767889054848634496309672687089961659404e-07',
                   '-5.125309226510821380097226378219650957199e-08',
                   '3.048859537856972635577813264215347682070e-09',
                   '-1.389976271585941361238252210621219258086e-10',
                   '4.704164267289991379740337499442804533393e-12',
                   '-1.132342670092216676813702977101988168170e-13',
                   '1.824345098049373687569378456747139377638e-15',
                   '-1.791641454777807114948357142007867857930e-17',
                   '9.108765355959209109895175829397816299966e-20',
                   '-1.660401736402055166724718838052384514483e-22'),
        high_q=_ld('1',
                   '-2.169855465456334109398757427681231252557e+00',
                   '2.322591192513290976964726281913672818074e+00',
                   '-1.625275527588871360012554245669893880287e+00',
                   '8.307827568524387115453112563337808771609e-01',
                   '-3.283520342971423622595752570043633453066e-01',
                   '1.036112385177655663181226022787541960128e-01',
                   '-2.658049675854302301943410969110308213449e-02',
                   '5.594232916811019674312451829387056772971e-03',
                   '-9.682117420514440669170644446720530951119e-04',
                   '1.373775076479943342597652514135717056402e-04',
                   '-1.585377827830451443222728940538258932617e-05',
                   '1.469487119911154060364041910223012615302e-06',
                   '-1.075235400618754592467376790070172663512e-07',
                   '6.072406717259994215240055677751661462408e-09',
                   '-2.571318839166908430254322849495115672150e-10',
                   '7.860204435599274911316716981969539571217e-12',
                   '-1.647194263529074575838983448164465153777e-13',
                   '2.194513208755261829948257460166939183883e-15',
                   '-1.645669178927884807010050119309005828655e-17',
                   '5.496854459511181731052565995680338061501e-20',
                   '-4.060391001681163801807157030538815464753e-23',
                   '-1.500455700173452211389785169624351996026e-26'),
        evaluate=estrin),
}


def reduce_angle(x, tier):
    """Reduce a real angle to [0, pi].

    Returns (theta, sign) with theta in [0, pi] such that
    Cl2(x) = sign * Cl2(theta) and Cl3(x) = Cl3(theta).
    Above pi the reflection 2 pi - theta is computed as (p0 - theta) + p1,
    with p0 + p1 = 2 pi and p0 exact, to limit the cancellation.
    """
    sign = 1
    if x < 0:
        x = -x
        sign = -1
    if x >= tier.pi2:
        x = np.fmod(x, tier.pi2)
    if x > tier.pi:
        x = (tier.p0 - x) + tier.p1
        sign = -sign
    return x, sign


def _pade(z, p, q, evaluate):
    return evaluate(z, p) / evaluate(z, q)


def _cl2(x, tier):
    x, sign = reduce_angle(tier.dtype(x), tier)

    if x == 0 or x == tier.pi:
        return tier.dtype(0)

    t = CL2[tier.name]
    if x < tier.pih:
        y = x * x
        r = _pade(y - tier.pi28, t.low_p, t.low_q, t.evaluate)
        h = x * (1 - np.log(x) + y * r / 2)
    else:
        y = tier.pi - x
        h = y * _pade(y * y - tier.pi28, t.high_p, t.high_q, t.evaluate)

    return sign * h


def _cl3(x, tier):
    x, _ = reduce_angle(tier.dtype(x), tier)

    if x == 0:
        return tier.zeta3

    t = CL3[tier.name]
    if x < tier.pih:
        y = x * x
        r = _pade(y - tier.pi28, t.low_p, t.low_q, t.evaluate)
        h = tier.zeta3 + y * (r + np.log(x) / 2)
    else:
        y = tier.pi - x
        h = _pade(y * y - tier.pi28, t.high_p, t.high_q, t.evaluate)

    return h


def Cl2(theta):
    """Clausen function Cl2(theta) = Im(Li2(exp(i theta))).

    Args:
        theta : real angle, scalar or array. longdouble input is evaluated
            at long double precision, everything else at double precision.

    Returns:
        Cl2(theta), with the dtype of the evaluation tier.

    Raises:
        TypeError: for complex input
    """
    tier = tier_for(theta)
    return elementwise(partial(_cl2, tier=tier), theta, tier.dtype)


def Cl3(theta):
    """Clausen function Cl3(theta) = Re(Li3(exp(i theta))).

    Same dispatch rules as Cl2.
    """
    tier = tier_for(theta)
    return elementwise(partial(_cl3, tier=tier), theta, tier.dtype)
